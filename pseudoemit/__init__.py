"""Simplified pseudocode nodes for low-level operations."""
from pseudoemit.builder import OPERATIONS, add, and_, assign, build, or_, subtract, unknown, xor
from pseudoemit.structures.pseudo import Assignment, BinaryMath, CastAssignment, IncDec, MathAssignment, Operand, PseudoNode, UnknownOp
from pseudoemit.util.decoration import HtmlTheme, PlainTheme, TerminalTheme, Theme
