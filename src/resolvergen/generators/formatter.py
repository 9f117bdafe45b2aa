import shutil
import subprocess
from dataclasses import dataclass

from resolvergen import log

PRETTIER_EXECUTABLE = "prettier"
FORMAT_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class FormatResult:
    """Outcome of formatting generated code. On failure `code` holds the unformatted text."""

    code: str
    formatted: bool
    error: str | None = None


def format_code(code: str, executable: str = PRETTIER_EXECUTABLE) -> FormatResult:
    """
    Format TypeScript code with prettier.

    Formatting is best-effort: when prettier is missing or rejects the code, the raw code is
    returned with `formatted=False` and the reason in `error`.

    Args:
        code: TypeScript source to format
        executable: Name or path of the prettier executable

    Returns:
        FormatResult: The formatted code, or the original code when formatting failed
    """
    prettier_path = shutil.which(executable)
    if prettier_path is None:
        return _unformatted(code, f"'{executable}' executable not found")

    try:
        completed = subprocess.run(
            [prettier_path, "--parser", "typescript"],
            input=code,
            capture_output=True,
            text=True,
            timeout=FORMAT_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        return _unformatted(code, str(e))

    if completed.returncode != 0:
        return _unformatted(code, completed.stderr.strip() or f"exit code {completed.returncode}")

    log.debug("Formatted generated code with prettier")
    return FormatResult(code=completed.stdout, formatted=True)


def _unformatted(code: str, error: str) -> FormatResult:
    log.warning(f"Could not format generated code, unformatted code is returned: {error}")
    return FormatResult(code=code, formatted=False, error=error)
