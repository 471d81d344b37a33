"""
Input Sanitization Module

Cleans free text submitted through the API and the forms before it is
stored. Output escaping is left to Jinja autoescaping, so stored text is
kept as the user typed it apart from control characters and length.
"""

import re
from urllib.parse import urlparse

# Control characters except tab, newline and carriage return
_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')
_LINE_BREAKS = re.compile(r'[\r\n]+')


def clean_text(text, max_length=10000, keep_newlines=False):
    """
    Remove control characters and truncate.

    Leading and trailing whitespace is preserved; callers that want it
    removed strip explicitly (ingredient names keep theirs, since the
    grocery list groups names without trimming).

    Args:
        text: The text to clean (can be None)
        max_length: Maximum allowed length (default 10000)
        keep_newlines: Keep line breaks (instructions are newline-delimited)

    Returns:
        Cleaned string, or None when text is None
    """
    if text is None:
        return None

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS.sub('', text)
    if keep_newlines:
        text = text.replace('\r\n', '\n').replace('\r', '\n')
    else:
        text = _LINE_BREAKS.sub(' ', text)

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_url(url):
    """
    Sanitize an image URL by rejecting dangerous schemes.

    Prevents javascript:, data:, vbscript: and other schemes that could
    execute code when used in an img src attribute. Relative paths such
    as /uploads/recipe_1.jpg are allowed.

    Args:
        url: The URL to validate (can be None)

    Returns:
        The URL if safe, empty string if unsafe or invalid
    """
    if not url:
        return ''

    if not isinstance(url, str):
        return ''

    url = url.strip()

    dangerous_schemes = {
        'javascript', 'data', 'vbscript', 'file',
        'blob', 'about', 'chrome', 'moz-extension'
    }

    try:
        parsed = urlparse(url)
    except ValueError:
        return ''

    scheme = parsed.scheme.lower()
    if scheme not in ('http', 'https', ''):
        return ''

    # Encoded or embedded schemes, e.g. "/x?javascript:..." or "%6aavascript:"
    url_lower = url.lower()
    for dangerous in dangerous_schemes:
        if dangerous + ':' in url_lower:
            return ''
        if dangerous.replace('a', '%61') in url_lower:
            return ''

    return url
