import logging
from dataclasses import dataclass

from rpncalc.calculator import calculate
from rpncalc.runtime import CalcRuntimeError
from rpncalc.tokenizer import TokenizerError
from rpncalc.utils import format_result

logger = logging.getLogger(__name__)

ERROR_OUTPUT = "Error"


@dataclass
class CalcState:
    """Calculator front panel: text being typed, last displayed output and memory register.

    Memory holds the output text as displayed, recalling it types that text back into the input.
    """

    input: str = ""
    output: str = "0"
    memory: str = ""

    def type_text(self, text: str) -> None:
        self.input += text

    def clear(self) -> None:
        self.input = ""

    def calculate(self) -> str:
        try:
            result = calculate(self.input)
        except (TokenizerError, CalcRuntimeError) as e:
            logger.debug("Failed to calculate %r:\n%s", self.input, e)
            result = None
        if result is None:
            self.output = ERROR_OUTPUT
        else:
            self.output = format_result(result)
        return self.output

    def memory_save(self) -> None:
        self.memory = self.output

    def memory_recall(self) -> None:
        self.input += self.memory

    def press(self, key: str) -> None:
        command = BUTTONS.get(key.strip().upper())
        if command is None:
            self.type_text(key)
        else:
            command(self)


BUTTONS = {
    "=": CalcState.calculate,
    "C": CalcState.clear,
    "M+": CalcState.memory_save,
    "MR": CalcState.memory_recall,
}
