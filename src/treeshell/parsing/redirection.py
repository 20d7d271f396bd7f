"""
Redirection markers on a command line.

A line may end in ``> target`` (output file) or ``| target`` (modifier), and
independently carry ``< target`` (input file). The markers are stripped from
the line and recorded in the session history, where callbacks read them.
"""

from attrs import frozen

from treeshell.core.types import SessionHistory
from treeshell.exceptions import MalformedRedirectionError

OUTPUT_FILE_KEY = "tx_output_file"
MODIFIER_KEY = "tx_modifier"
INPUT_FILE_KEY = "tx_input_file"

OUTPUT_SIGIL = ">"
MODIFIER_SIGIL = "|"
INPUT_SIGIL = "<"


@frozen
class Redirection:
    """A command line with its redirection markers separated out."""

    line: str
    output_file: str | None = None
    modifier: str | None = None
    input_file: str | None = None

    def apply(self, history: SessionHistory) -> None:
        """
        Record the markers in the session history.

        Markers that are absent from this line are removed, so redirection
        never leaks into the following lines unless it is repeated. The output
        file and the modifier are only cleared together, when neither is given.

        Params:
            history: Session history to update in place
        """
        if self.output_file is not None:
            history[OUTPUT_FILE_KEY] = self.output_file
        elif self.modifier is not None:
            history[MODIFIER_KEY] = self.modifier
        else:
            history.pop(MODIFIER_KEY, None)
            history.pop(OUTPUT_FILE_KEY, None)

        if self.input_file is not None:
            history[INPUT_FILE_KEY] = self.input_file
        else:
            history.pop(INPUT_FILE_KEY, None)


def split_marker(line: str, sigil: str) -> tuple[str, str]:
    """
    Split ``<left> <sigil> <right>`` into its two stripped sides.

    A bare sigil with nothing after it (``show >``) is rejected rather than
    recorded as an empty target, so callbacks never see ``""`` as a file name.

    Params:
        line: Line containing ``sigil``
        sigil: One of '>', '|' or '<'

    Returns:
        The left side and the redirection target

    Raises:
        MalformedRedirectionError: If the sigil appears more than once, or the
            target is empty or contains whitespace
    """
    parts = line.split(sigil)
    if len(parts) != 2:
        raise MalformedRedirectionError(line, f"expected a single '{sigil}'")

    left, right = parts[0].strip(), parts[1].strip()
    if not right:
        raise MalformedRedirectionError(line, f"missing target after '{sigil}'")
    if any(char.isspace() for char in right):
        raise MalformedRedirectionError(right, "target must not contain whitespace")
    return left, right


def parse_redirection(line: str) -> Redirection:
    """
    Separate redirection markers from a command line.

    '>' takes precedence over '|'; '<' is checked on what remains, and its
    sigil is kept as the last token of the line for callbacks that look for it.

    Params:
        line: Raw command line

    Returns:
        Redirection holding the line to resolve and the marker targets

    Raises:
        MalformedRedirectionError: If any marker is malformed

    Examples:
        "show > out.txt" -> Redirection("show", output_file="out.txt")
        "load < in.txt" -> Redirection("load <", input_file="in.txt")
    """
    output_file = modifier = input_file = None
    if OUTPUT_SIGIL in line:
        line, output_file = split_marker(line, OUTPUT_SIGIL)
    elif MODIFIER_SIGIL in line:
        line, modifier = split_marker(line, MODIFIER_SIGIL)

    if INPUT_SIGIL in line:
        left, input_file = split_marker(line, INPUT_SIGIL)
        line = f"{left} {INPUT_SIGIL}"

    return Redirection(
        line=line,
        output_file=output_file,
        modifier=modifier,
        input_file=input_file,
    )
