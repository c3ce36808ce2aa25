"""Core components for the Gopher client."""

from .command_parser import CommandLine, parse_index, split_lines
from .interpreter import Interpreter
from .menu_renderer import MenuRenderer
from .navigator import Navigator
from .pager import TextPager
from .selector import Selector, parse_selector, print_selector
from .selector_list import SelectorList, decode_menu, encode_menu
from .session import Session
from .variables import VariableStore

__all__ = [
    "CommandLine",
    "parse_index",
    "split_lines",
    "Interpreter",
    "MenuRenderer",
    "Navigator",
    "TextPager",
    "Selector",
    "parse_selector",
    "print_selector",
    "SelectorList",
    "decode_menu",
    "encode_menu",
    "Session",
    "VariableStore",
]
