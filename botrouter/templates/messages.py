"""
Message templates for the demo bot.

All user-facing messages are defined here for easy localization
and consistent messaging. Uses HTML formatting for Telegram.

Template naming convention:
- WELCOME, HELP - informational messages
- ERROR_* - error messages
"""

# =============================================================================
# Informational Messages
# =============================================================================

WELCOME = """
Hi! I am a <b>botrouter</b> demo bot.

Send /help to see what I understand.
""".strip()

HELP = """
<b>What I understand:</b>

• /start - welcome message
• /help - this message
• <code>echo ...</code> - I repeat the rest of your message
• anything containing <code>ping</code> - I answer pong

Routes are checked in registration order, the first match wins.
""".strip()

HELP_BUTTON = "Help"

# =============================================================================
# Error Messages
# =============================================================================

ERROR_GENERIC = """
Something went wrong. Please try again later.
""".strip()
