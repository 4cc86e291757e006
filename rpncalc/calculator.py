import logging
from typing import Optional

from rpncalc.postfix import to_postfix
from rpncalc.runtime import evaluate
from rpncalc.tokenizer import tokenize, untokenize

logger = logging.getLogger(__name__)


def calculate(code: str) -> Optional[float]:
    """Tokenizes, converts to postfix and evaluates an infix expression.

    Raises TokenizerError for malformed input text and CalcRuntimeError for token
    sequences that can't be evaluated; returns None when there is no unique result.
    """
    tokens = tokenize(code)
    postfix = to_postfix(tokens)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("tokens: %s", untokenize(tokens))
        logger.debug("postfix: %s", untokenize(postfix))
    result = evaluate(postfix)
    logger.debug("result: %s", result)
    return result
