from .nodes import Assignment, BinaryMath, CastAssignment, IncDec, MathAssignment, PseudoNode, UnknownOp
from .operands import ONE, ZERO, Operand
