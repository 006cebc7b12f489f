from .quiz_engine import QUIZ_LENGTH, QuizRound, QuizStatus, initialize_quiz

__all__ = ['QUIZ_LENGTH', 'QuizRound', 'QuizStatus', 'initialize_quiz']
