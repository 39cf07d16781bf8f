"""Django signals that keep profile rows in step with auth accounts."""

from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver
from loguru import logger

from events.models import Profile


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_profile_on_signup(sender, instance, created, **kwargs):
    """Create the profile row for a newly created account, as a plain user."""
    if not created:
        return
    Profile.objects.get_or_create(
        account=instance,
        defaults={
            "email": instance.email or instance.get_username(),
            "full_name": instance.get_full_name() or None,
            "role": "admin" if instance.is_superuser else "user",
        },
    )
    logger.info("Profile created for account {}", instance.pk)
