"""
Plot Language Interpreter

A small language for describing equations in one free variable and
rendering their curves to an image.
"""

from .main import run_plot, compile_script

__version__ = "0.1.0"
__all__ = ["run_plot", "compile_script"]
