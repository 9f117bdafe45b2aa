from resolvergen.logger import get_logger

__author__ = """Resolvergen Contributors"""
__version__ = "0.3.0"

log = get_logger("resolvergen")
