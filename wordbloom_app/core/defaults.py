"""
Centralized Default Values for WordBloom.

Source of truth for every persisted value that may be missing from the
``app_state`` table. ``AppState.get`` falls back to ``DEFAULT_APP_STATE``.
"""

# --- App state keys ---
USER_SETTINGS_KEY = 'user_settings'
LEARNED_TODAY_KEY = 'learned_words_today'
TOTAL_LEARNED_KEY = 'total_words_learned'
STREAK_KEY = 'learning_streak'
QUIZ_HISTORY_KEY = 'quiz_history'
QUIZ_TAKEN_TODAY_KEY = 'quiz_taken_today'

DEFAULT_USER_SETTINGS = {
    'username': '',
    'grade': 'middle1',
    'textbook': '',
    'daily_goal': 10,
    'theme': 'dark',
    'speech_rate': 1.0,
    'auto_play_audio': True,
    'xp': 0,
    'level': 1,
}

DEFAULT_APP_STATE = {
    USER_SETTINGS_KEY: DEFAULT_USER_SETTINGS,
    LEARNED_TODAY_KEY: {'count': 0, 'date': None},
    TOTAL_LEARNED_KEY: 0,
    STREAK_KEY: {'current_streak': 0, 'best_streak': 0, 'last_learned_date': None},
    QUIZ_HISTORY_KEY: [],
    QUIZ_TAKEN_TODAY_KEY: {'taken': False, 'date': None},
}

# --- Gamification ---
XP_WORD_LEARNED = 5
XP_QUICK_REVIEW = 1
XP_CUSTOM_WORD = 2
QUIZ_XP_MULTIPLIER = 1.5

# Display-only rewards of the dashboard challenges
CHALLENGE_REWARDS = {
    'daily_goal': 20,
    'take_quiz': 15,
    'review_incorrect': 10,
}

THEMES = ('light', 'dark')
SPEECH_RATE_MIN = 0.1
SPEECH_RATE_MAX = 10.0
