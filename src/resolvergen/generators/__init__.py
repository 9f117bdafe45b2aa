"""TypeScript resolver typings generator."""

from .formatter import FormatResult, format_code
from .ts_generator import TypeScriptResolverGenerator, generate, generate_code

__all__ = ["FormatResult", "TypeScriptResolverGenerator", "format_code", "generate", "generate_code"]
