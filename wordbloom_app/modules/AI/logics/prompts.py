"""
Prompt templates for the Gemini-backed features.
"""

# Longest text sent for summarization
SUMMARY_MAX_CHARS = 30000

WORD_DETAILS_PROMPT = """Provide details for the English word "{term}". Your response MUST be a JSON object with the following fields: "pronunciation" (phonetic, optional), "partOfSpeech" (e.g., noun, verb, adjective, in Korean e.g., 명사, 동사), "meaning" (Korean meaning), "exampleSentence" (simple English example), "exampleSentenceMeaning" (Korean translation of example). Ensure exampleSentence is appropriate for language learners. If "{term}" seems like a typo or not a common English word, try to correct it if obvious and return details for the corrected term, including the corrected "term" in the JSON. If correction is not obvious or it's not a word, return null for all fields.

Example JSON:
{{
  "term": "person",
  "pronunciation": "/ˈpɜːrsən/",
  "partOfSpeech": "명사",
  "meaning": "사람",
  "exampleSentence": "This is a person.",
  "exampleSentenceMeaning": "이것은 사람입니다."
}}"""

ALTERNATE_EXAMPLE_PROMPT = """You are an English vocabulary tutor for Korean students.
The user is learning the word: "{term}" (Part of speech: {part_of_speech}, Korean meaning: {meaning}).
The user's current grade level is: {grade}.
The user has already seen this example: "{example_sentence}"

Generate ONE NEW, DIFFERENT, and SIMPLE English example sentence for the word "{term}" that is appropriate for a {grade} Korean student.
The new example sentence should clearly illustrate the meaning of "{term}".
Your response MUST be a JSON object with the following fields:
"newExampleSentence": "The new English example sentence.",
"newExampleSentenceMeaning": "The Korean translation of the new example sentence."

Example JSON response:
{{
  "newExampleSentence": "She showed great courage when she helped the lost child.",
  "newExampleSentenceMeaning": "그녀는 길 잃은 아이를 도왔을 때 대단한 용기를 보여주었다."
}}"""

IMAGE_PROMPT = (
    'A clear, simple, educational, dictionary illustration style image representing '
    'the English word: "{term}". Focus on a single, easily recognizable subject related '
    "to the word's most common meaning. Vibrant and kid-friendly."
)

SUMMARY_PROMPT = (
    'Your response MUST be a JSON object with a "summary" field. Please provide a brief '
    'summary of the following text in Korean (around 2-3 sentences), focusing on the main '
    'topics or themes. Text: """{text}"""'
)

CHAT_SYSTEM_INSTRUCTION = """You are a friendly and helpful AI English vocabulary tutor for a {grade} Korean student named {username}.
Your main goal is to help the student understand and practice English words.
Be encouraging and patient. Keep your responses concise and easy to understand for the student's level.
You can ask questions to check understanding, provide simpler explanations, or offer different example sentences for words if the student is confused.
If the student asks about a specific word you know from their word list, try to use its details (meaning, part of speech, example) in your explanation.
If the student mentions a word you don't know, you can ask them to provide its meaning or use it in a sentence, then you can discuss it.
You can also suggest simple vocabulary practice activities or quiz the student on a word.
Start the conversation by greeting the student and asking how you can help them with English vocabulary today.
Respond in Korean, but use English words when discussing vocabulary terms. Example: "안녕하세요, {username}님! 'apple'이라는 단어에 대해 더 알고 싶으신가요?"
Do not use markdown formatting like **bold** or *italics* in your responses. Keep it plain text."""

CHAT_OPENING_MESSAGE = 'Hello'
CHAT_FALLBACK_GREETING = '안녕하세요, {username}님! 오늘 영어 단어 학습에 대해 무엇을 도와드릴까요?'


def word_details_prompt(term: str) -> str:
    return WORD_DETAILS_PROMPT.format(term=term)


def alternate_example_prompt(word, grade: str) -> str:
    """Prompt for a new example of ``word`` (any object with the word fields)."""
    return ALTERNATE_EXAMPLE_PROMPT.format(
        term=word.term,
        part_of_speech=word.part_of_speech,
        meaning=word.meaning,
        grade=grade,
        example_sentence=word.example_sentence,
    )


def image_prompt(term: str) -> str:
    return IMAGE_PROMPT.format(term=term)


def summary_prompt(text: str) -> str:
    """
    Only the first ``SUMMARY_MAX_CHARS`` characters are sent.

    >>> len(summary_prompt('a' * 40000)) - len(summary_prompt(''))
    30000
    """
    return SUMMARY_PROMPT.format(text=text[:SUMMARY_MAX_CHARS])


def chat_system_instruction(grade: str, username: str) -> str:
    return CHAT_SYSTEM_INSTRUCTION.format(grade=grade, username=username)
