"""
                        Services Module

Side-effecting services used by the form flows.

Services:
    - notifications: Mock and SendGrid mail transports
    - dispatcher: Composes and sends the two emails of a submission
"""

from elsabor.services.dispatcher import NotificationDispatcher, get_dispatcher

__all__ = ["NotificationDispatcher", "get_dispatcher"]
