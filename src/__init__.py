"""
Notification Events API

Read access to notification event records: audit entries describing
attempts to deliver notifications through channels (webhook, chat,
email) and the delivery outcome reported by each channel.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
