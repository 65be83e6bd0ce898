import io
import pytest
from symbolic.parser import parse_formulas
from formula_order import main


@pytest.fixture
def diamond_text():
    # top depends on left and right, both depend on base
    return "top = left * right\nleft = base + 1\nright = base - 1\nbase = 2\n"


@pytest.fixture
def diamond_graph(diamond_text):
    return parse_formulas(diamond_text)


@pytest.fixture
def run_cli():
    """
    Run the command line with the given stdin text and arguments.
    Returns (exit status, stdout text, stderr text).
    """
    def _run(text="", *args):
        stdout, stderr = io.StringIO(), io.StringIO()
        status = main(list(args), stdin=io.StringIO(text), stdout=stdout, stderr=stderr)
        return status, stdout.getvalue(), stderr.getvalue()
    return _run


@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog
