"""Minifiers for package content.

Both are whitespace-level minifiers: they never rename identifiers or
rewrite values, so their output is safe to concatenate.
"""

import re

# Comments and quoted strings; split() puts them at odd indexes
_CSS_TOKENS = re.compile(
    r"""(/\*.*?\*/|"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*')""", re.DOTALL
)
_CSS_WHITESPACE = re.compile(r"\s+")
_CSS_PUNCTUATION = re.compile(r"\s*([{};,>])\s*")
# Space before a colon is a descendant combinator, so only trim after it
_CSS_COLON = re.compile(r":\s+")


def _minify_css_code(code: str) -> str:
    result = _CSS_WHITESPACE.sub(" ", code)
    result = _CSS_PUNCTUATION.sub(r"\1", result)
    result = _CSS_COLON.sub(":", result)
    return result.replace(";}", "}")


def minify_css(content: str) -> str:
    """Strip comments and redundant whitespace from a stylesheet.

    Quoted strings are copied through untouched.
    """
    chunks: list[str] = []
    code = ""
    for index, token in enumerate(_CSS_TOKENS.split(content)):
        if index % 2 == 0:
            code += token
        elif not token.startswith("/*"):
            chunks.append(_minify_css_code(code))
            chunks.append(token)
            code = ""
    chunks.append(_minify_css_code(code))
    return "".join(chunks).strip()


def minify_js(content: str) -> str:
    """Trim each line of a script and drop blank lines.

    Line breaks are kept because statements may rely on them for
    termination.
    """
    lines = (line.strip() for line in content.splitlines())
    return "\n".join(line for line in lines if line)
