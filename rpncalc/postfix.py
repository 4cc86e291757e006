from rpncalc.tokenizer import Bracket, Number, Operator, Token


def get_op_precedence(op: Operator) -> int:
    return {
        Operator.ADD: 0,
        Operator.SUB: 0,
        Operator.MUL: 1,
        Operator.DIV: 1,
    }[op]


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Shunting-yard reordering of infix tokens; brackets are dropped from the output.

    The input is expected to come from tokenize(), so brackets are balanced. Operator
    adjacency is not checked, malformed sequences are left for the evaluator to reject.
    """
    output: list[Token] = []
    stack: list[Operator | Bracket] = []
    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Operator):
            precedence = get_op_precedence(token)
            # equal precedence pops too, so evaluation is left to right
            while stack and isinstance(stack[-1], Operator) and get_op_precedence(stack[-1]) >= precedence:
                output.append(stack.pop())
            stack.append(token)
        elif token is Bracket.OPEN:
            stack.append(token)
        elif token is Bracket.CLOSE:
            while stack and stack[-1] is not Bracket.OPEN:
                output.append(stack.pop())
            if stack:
                stack.pop()

    while stack:
        top = stack.pop()
        if isinstance(top, Operator):
            output.append(top)

    return output
