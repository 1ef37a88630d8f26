"""
Accounts package: user model and the account service
(registration, login, profile updates).
"""

__version__ = "1.0.0"
