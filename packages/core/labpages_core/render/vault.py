"""Code-block vault: keeps fenced code out of the markdown transformer.

Fenced bodies are swapped for opaque ``__CODE_BLOCK_<i>__`` tokens before any
other rewriting and put back, verbatim, as the very last step. Token-shaped
text the author wrote outside code is escaped on the way in and given back
as written, so only tokens the vault inserted are ever filled.
"""

import re
from dataclasses import dataclass, field

from labpages_core.utils.logging import get_logger

logger = get_logger(__name__)

FENCE = "```"
TOKEN_PATTERN = re.compile(r"__CODE_BLOCK_(0|[1-9][0-9]*)__")
# Private-use character placed after the prefix of author-written tokens.
ESCAPE = "\ue000"
_RESTORE_PATTERN = re.compile(r"__CODE_BLOCK_(\ue000?)(0|[1-9][0-9]*)__")
DEFAULT_PRE_CLASS = "bg-gray-900 text-white p-4 rounded-lg overflow-x-auto mb-4 font-mono text-sm"


def token_for(index: int) -> str:
    """Return the placeholder token for vault entry ``index``."""
    return f"__CODE_BLOCK_{index}__"


@dataclass(frozen=True)
class CodeBlockVault:
    """Ordered code-block bodies extracted from one document."""

    bodies: tuple[str, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.bodies)

    def wrap(self, index: int, pre_class: str = DEFAULT_PRE_CLASS) -> str:
        """Render entry ``index`` as a preformatted block."""
        return f'<pre class="{pre_class}"><code>{self.bodies[index]}</code></pre>'


def _escape(prose: str) -> str:
    return TOKEN_PATTERN.sub(lambda match: f"__CODE_BLOCK_{ESCAPE}{match.group(1)}__", prose)


def extract(text: str) -> tuple[str, CodeBlockVault]:
    """Replace every fenced block with a token.

    Fences pair up left to right. The stored body is everything between the
    two fences, info string included. An opening fence with no closing fence
    runs to the end of the input. Token-shaped text between fences is escaped.

    Args:
        text: Raw lesson markdown

    Returns:
        Tuple of (rewritten text, vault)
    """
    parts: list[str] = []
    bodies: list[str] = []
    position = 0

    while True:
        start = text.find(FENCE, position)
        if start == -1:
            parts.append(_escape(text[position:]))
            break

        parts.append(_escape(text[position:start]))
        body_start = start + len(FENCE)
        end = text.find(FENCE, body_start)
        if end == -1:
            logger.debug("Unterminated code fence at offset %d, running to end of input", start)
            bodies.append(text[body_start:])
            parts.append(token_for(len(bodies) - 1))
            break

        bodies.append(text[body_start:end])
        parts.append(token_for(len(bodies) - 1))
        position = end + len(FENCE)

    logger.debug("Extracted %d code block(s)", len(bodies))
    return "".join(parts), CodeBlockVault(tuple(bodies))


def restore(html: str, vault: CodeBlockVault, pre_class: str = DEFAULT_PRE_CLASS) -> str:
    """Replace tokens with their preformatted code blocks.

    Tokens whose index has no vault entry are left as they are; escaped
    author text gets its escape removed.
    """

    def _replace(match: re.Match[str]) -> str:
        escaped, digits = match.groups()
        if escaped:
            return f"__CODE_BLOCK_{digits}__"
        index = int(digits)
        if index >= len(vault):
            return match.group(0)
        return vault.wrap(index, pre_class)

    return _RESTORE_PATTERN.sub(_replace, html)


def count_tokens(text: str, vault: CodeBlockVault) -> int:
    """Count tokens in ``text`` that refer to an entry of ``vault``."""
    return sum(1 for match in TOKEN_PATTERN.finditer(text) if int(match.group(1)) < len(vault))
