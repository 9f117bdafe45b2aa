from pathlib import Path

from resolvergen import log


def write_generated_code(code: str, output_path: Path) -> None:
    """
    Write generated code to the specified output file, creating missing parent directories.

    Args:
        code: The generated source
        output_path: Path where the code should be written
    """
    log.info(f"Writing generated code to: {output_path}")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(code, encoding="utf-8")
        log.info(f"Successfully wrote {len(code)} characters to {output_path}")
    except OSError as e:
        log.error(f"Failed to write generated code to {output_path}: {e}")
        raise
