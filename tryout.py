from rpncalc.postfix import to_postfix
from rpncalc.runtime import CalcRuntimeError, evaluate
from rpncalc.tokenizer import TokenizerError, tokenize, untokenize

for code in [
    "5",
    "1 + 1",
    "12+3",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "8 - 3 - 2",
    "10 / 5/ 2",
    "7/6/2000",
    "1/0",
    "1 2",
    "1 + ",
    "(1 + 2",
    "1 + 2)",
    "2 @ 3",
    "1.5 + 2",
    "(1 + 14 * (54 * 2))",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except TokenizerError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    postfix = to_postfix(tokens)
    print(f"postfix: {untokenize(postfix)}")

    try:
        result = evaluate(postfix)
    except CalcRuntimeError as e:
        print(e)
        continue
    print(f"result: {'no value' if result is None else result}")
