import logging

from . import defaults
from .lexer import Lexer
from .parser import Parser
from .interpreter import Interpreter
from .rasterizer import rasterize
from .exporter import export_raster
from .printer import print_file

logger = logging.getLogger(__name__)


def compile_script(code, source_name='<script>'):
    """Lex, parse and interpret a script without rendering it.

    Args:
        code (str): Script text
        source_name (str): Name reported in diagnostics

    Returns:
        Layout: The interpreted program
    """
    logger.info("Tokenizing %s...", source_name)
    tokens = Lexer(code, source_name).tokenize()
    logger.debug("Tokens: %s", ' '.join(str(t) for t in tokens))

    logger.info("Parsing...")
    statements = Parser(tokens).parse()
    for statement in statements:
        logger.debug("Node: %s", statement)

    logger.info("Interpreting...")
    return Interpreter().interpret(statements)


def run_plot(code, source_name='<script>', output=None, allow_print=True,
             max_branches=defaults.MAX_BRANCHES):
    """Run a plot script end to end.

    Args:
        code (str): Script text
        source_name (str): Name reported in diagnostics
        output (str): Export path overriding the script's #export directive
        allow_print (bool): If False, #print_now() is ignored
        max_branches (int): MultiValue size limit

    Returns:
        tuple: (Layout, Raster, path the image was written to)
    """
    layout = compile_script(code, source_name)
    raster = rasterize(layout, max_branches=max_branches)

    path = output or layout.export
    export_raster(raster, path)

    if layout.print_now and allow_print:
        print_file(path)
    return layout, raster, path
