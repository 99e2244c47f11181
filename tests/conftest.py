import pytest

from stackpp.reader.parser import parse
from stackpp.evaluation.evaluator import evaluate
from stackpp.types.machine import Machine


# Machines used in tests never touch the real stdin/stdout: `print` appends
# to the `output` list and `input` pops from the `lines` list.


@pytest.fixture
def output():
    return []


@pytest.fixture
def lines():
    return []


@pytest.fixture
def machine(output, lines):
    def provide():
        if not lines:
            raise EOFError
        return lines.pop(0)

    return Machine(output_sink=output.append, input_provider=provide)


@pytest.fixture
def run(machine):
    """Parse and evaluate `code` against the shared test machine."""

    def _run(code: str) -> Machine:
        evaluate(parse(code), machine)
        return machine

    return _run
