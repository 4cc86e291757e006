import logging
import os

from rpncalc.session import BUTTONS, CalcState

if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("RPNCALC_LOG_LEVEL", "WARNING").upper())

    state = CalcState()

    while True:
        try:
            line = input(f"{state.input}> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        key = line.strip()
        if not key:
            continue

        if key.upper() in BUTTONS:
            state.press(key)
        else:
            state.type_text(key)
            state.calculate()

        if key.upper() in {"M+", "MR"}:
            print(f"Memory: {state.memory}")
        elif key.upper() != "C":
            print(f"Result: {state.output}")
