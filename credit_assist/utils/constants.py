"""
Shared constants for bill uploads and dashboard routing.
"""

# Image types accepted for bill uploads, in the order shown to users
SUPPORTED_IMAGE_MIME_TYPES = (
    "image/png",
    "image/jpeg",
    "image/webp",
)

# Where the client is sent after a successful registration
POST_REGISTRATION_REDIRECT = "/login"

CHAT_GREETING = (
    "Namaste! I am Nidhi, your financial literacy assistant. "
    "Ask me anything about saving, loans, interest or budgeting."
)

CHAT_ERROR_REPLY = "Sorry, I encountered an error. Please try again later."
