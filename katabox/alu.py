"""A tiny arithmetic logic unit with status reporting."""

import operator
from dataclasses import dataclass
from enum import IntEnum

NO_RESULT = 65535
UNSET_OPERAND = -1

_OPERATIONS = {
    "ADD": operator.add,
    "MUL": operator.mul,
    "SUB": operator.sub,
}


class Status(IntEnum):
    """Outcome of an ALU operation."""

    PENDING = -1
    OK = 0
    BAD_OPERAND1 = 1
    BAD_OPERAND2 = 2
    BAD_OPCODE = 3


@dataclass(frozen=True)
class Result:
    """Value and status produced by the ALU."""

    status: Status = Status.PENDING
    value: int = NO_RESULT


@dataclass
class ALU:
    """Holds two operands and an opcode; an unset operand is -1."""

    operand1: int = UNSET_OPERAND
    operand2: int = UNSET_OPERAND
    opcode: str = ""

    def enable_signal(self) -> Result:
        """Run the current opcode on the operands and report the outcome."""
        operation = _OPERATIONS.get(self.opcode)
        if operation is None:
            return Result(Status.BAD_OPCODE)
        if self.operand1 == UNSET_OPERAND:
            return Result(Status.BAD_OPERAND1)
        if self.operand2 == UNSET_OPERAND:
            return Result(Status.BAD_OPERAND2)
        return Result(Status.OK, operation(self.operand1, self.operand2))