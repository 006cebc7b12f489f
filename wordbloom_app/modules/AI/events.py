from flask import current_app

from wordbloom_app.core.signals import ai_cooldown_expired, ai_quota_exhausted


@ai_quota_exhausted.connect
def on_quota_exhausted(sender, **kwargs):
    """Record the pause; every AI feature is suspended until the cooldown ends."""
    cooldown_until = kwargs.get('cooldown_until')
    current_app.logger.warning(
        f"[AIEvent] Quota exhausted during {kwargs.get('feature')}; "
        f"AI calls resume after {cooldown_until.isoformat() if cooldown_until else 'the cooldown'}"
    )


@ai_cooldown_expired.connect
def on_cooldown_expired(sender, **kwargs):
    current_app.logger.info("[AIEvent] Quota cooldown finished, AI calls may resume")
