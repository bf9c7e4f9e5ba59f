"""
Application constants for the scraping checker
"""

# Exit codes for the CLI
EXIT_CODES = {
    'SUCCESS': 0,
    'FAILURE': 1,
    'CONFIGURATION_ERROR': 2,
    'INVALID_ARGUMENT': 3,
}

# Accepted LOG_LEVEL values, mapped onto stdlib logging levels
LOG_LEVELS = {
    'trace': 5,
    'debug': 10,
    'info': 20,
    'warn': 30,
    'error': 40,
    'fatal': 50,
}

APP_ENVS = ('development', 'production', 'test')

DEFAULT_URL = 'https://apify.com/theo/ap-news-scraper'
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_WAIT_UNTIL = 'domcontentloaded'
WAIT_UNTIL_CHOICES = ('load', 'domcontentloaded', 'networkidle')
DEFAULT_TOP = 3

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)
DEFAULT_VIEWPORT = {'width': 1920, 'height': 1080}
