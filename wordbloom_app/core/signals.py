"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker to enable decoupled communication between modules.

Usage:
    # Publisher (sender)
    from wordbloom_app.core.signals import word_learned
    word_learned.send(None, word_id='m1-001', is_quick_review=False, counted=True)

    # Subscriber (receiver) - in module's events.py
    @word_learned.connect
    def on_word_learned(sender, **kwargs):
        ...
"""
from blinker import Namespace

# Create namespace for learning-related signals
learning_signals = Namespace()

# Signal: Fired after a word is marked learned/reviewed in a session
# Payload: word_id, is_quick_review (bool), counted (bool, first learn of the day)
word_learned = learning_signals.signal('word_learned')

# Signal: Fired when a quiz round is finished
# Payload: score, total, incorrect_word_ids
quiz_completed = learning_signals.signal('quiz_completed')

# ============================================
# Vocabulary Signals
# ============================================
vocabulary_signals = Namespace()

# Signal: Fired when a custom word is created (not on edits)
# Payload: word_id, term, grade_level, unit
custom_word_created = vocabulary_signals.signal('custom_word_created')

# Signal: Fired when a custom word and its stat are deleted
# Payload: word_id, term
custom_word_deleted = vocabulary_signals.signal('custom_word_deleted')

# ============================================
# Gamification Signals
# ============================================
gamification_signals = Namespace()

# Signal: Fired when XP is added
# Payload: amount, reason, new_total, level
xp_awarded = gamification_signals.signal('xp_awarded')

# Signal: Fired once when the stored level increases
# Payload: old_level, new_level, xp
level_up = gamification_signals.signal('level_up')

# ============================================
# AI Services Signals
# ============================================
ai_signals = Namespace()

# Signal: Fired when a call is classified as quota exhaustion
# Payload: feature (str), cooldown_until (datetime)
ai_quota_exhausted = ai_signals.signal('ai_quota_exhausted')

# Signal: Fired when the quota cooldown is observed to be over
ai_cooldown_expired = ai_signals.signal('ai_cooldown_expired')
