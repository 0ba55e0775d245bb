"""Line parser for Memberstack Markdown documentation."""

from dataclasses import dataclass
from pathlib import PurePosixPath

HEADING_MARKER = "#"
CODE_SPAN_DELIMITER = "`"
TITLE_DEPTH = 1
METHOD_DEPTH = 3


@dataclass(frozen=True)
class Heading:
    """An ATX heading parsed from a single line."""

    depth: int
    text: str


class MarkdownParser:
    """Parses headings, titles and method signatures from Markdown text.

    The grammar is deliberately small and line oriented:

    * a heading is ``depth`` heading markers at the start of a line followed
      by at least one whitespace character and non-empty text;
    * a method heading is a heading of depth 3 whose text opens with a code
      span, the signature being the text up to the closing delimiter.
    """

    def parse_heading(self, line: str) -> Heading | None:
        """Parse a line as an ATX heading.

        Args:
            line: Single line of Markdown without the trailing newline.

        Returns:
            Heading instance, or None if the line is not a heading.
        """
        depth = len(line) - len(line.lstrip(HEADING_MARKER))
        if depth == 0:
            return None
        rest = line[depth:]
        if not rest or not rest[0].isspace():
            return None
        text = rest.strip()
        if not text:
            return None
        return Heading(depth=depth, text=text)

    def parse_method_heading(self, line: str) -> str | None:
        """Extract the signature from a depth 3 code span heading.

        Args:
            line: Single line of Markdown.

        Returns:
            Signature text inside the code span, or None if the line does
            not follow the method heading grammar.
        """
        heading = self.parse_heading(line)
        if heading is None or heading.depth != METHOD_DEPTH:
            return None
        if not heading.text.startswith(CODE_SPAN_DELIMITER):
            return None
        token, delimiter, _ = heading.text[1:].partition(CODE_SPAN_DELIMITER)
        if not delimiter or not token:
            return None
        return token

    def extract_title(self, content: str, path: str) -> str:
        """Extract the document title.

        Args:
            content: Full Markdown content.
            path: Relative path used for the fallback title.

        Returns:
            Text of the first level 1 heading, else the filename stem.
        """
        for line in content.splitlines():
            heading = self.parse_heading(line)
            if heading is not None and heading.depth == TITLE_DEPTH:
                return heading.text
        return PurePosixPath(path).stem

    def extract_method_signatures(self, content: str) -> list[str]:
        """Collect method signatures in document order.

        Duplicates are kept because they reflect the document as written.

        Args:
            content: Full Markdown content.

        Returns:
            List of signature strings.
        """
        signatures = []
        for line in content.split("\n"):
            signature = self.parse_method_heading(line.rstrip("\r"))
            if signature is not None:
                signatures.append(signature)
        return signatures
