from calculator_engine import CalculatorEngine
from calculator_state import CalculatorState, press_key
import sys


def _walk(keys: str, *, engine: CalculatorEngine | None = None):
	engine = engine if engine is not None else CalculatorEngine()
	state = CalculatorState()
	states = []

	for key in keys:
		before = state.display
		state = press_key(state, key, engine)
		if state.display != before:
			states.append(state.display)

	return state, states


def inspect_keys(keys: str, *, show: int = 10) -> None:
	"""Imprime el estado visible tras cada pulsación que cambia la pantalla."""
	state, states = _walk(keys)

	print("Keypad inspection")
	print(f"keys:           {keys}")
	print(f"total states:   {len(states)}")

	if not states:
		print("states:         (no changes)")
	else:
		limit = max(1, show)
		print("states:")
		for i, text in enumerate(states[:limit], start=1):
			print(f"  {i}. {text}")

	print(f"final display:  {state.display}")
	print(f"error state:    {state.error}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	end, _ = _walk("2+3*4=")
	expected_actual.append(("2+3*4=", "14", end.display))
	checks.append(("multiplication binds before addition", end.display == "14"))

	end, _ = _walk("3*-4*-5=")
	expected_actual.append(("3*-4*-5=", "60", end.display))
	checks.append(("chained unary minus folds into each numeral", end.display == "60"))

	end, _ = _walk("0.1+0.2=")
	expected_actual.append(("0.1+0.2=", "0.3", end.display))
	checks.append(("floating noise is rounded away", end.display == "0.3"))

	end, _ = _walk("*/+")
	checks.append(("expression never opens with * / +", end.display == ""))

	end, _ = _walk("3+*--4")
	expected_actual.append(("3+*--4", "3+-4", end.display))
	checks.append(("operator runs collapse to one unary minus", end.display == "3+-4"))

	end, _ = _walk("1.2.3")
	expected_actual.append(("1.2.3", "1.23", end.display))
	checks.append(("second decimal point in a number is ignored", end.display == "1.23"))

	end, _ = _walk(".5*-.5")
	expected_actual.append((".5*-.5", "0.5*-0.5", end.display))
	checks.append(("leading dot becomes 0. and -0.", end.display == "0.5*-0.5"))

	end, states = _walk("5/0=7")
	checks.append(("division by zero shows Error", "Error" in states))
	checks.append(("typing after Error starts a new expression", end.display == "7"))
	checks.append(("typing after Error leaves the error state", not end.error))

	end, _ = _walk("3+=")
	checks.append(("trailing operator shows Error", end.error))

	end, _ = _walk("3+=C")
	checks.append(("clear leaves the error state", end == CalculatorState()))

	end, _ = _walk("10/4=*2=")
	expected_actual.append(("10/4=*2=", "5", end.display))
	checks.append(("result can be reused as the next operand", end.display == "5"))

	end, _ = _walk("1/3=")
	expected_actual.append(("1/3=", "0.3333333333", end.display))
	checks.append(("results are cut at 10 decimals", end.display == "0.3333333333"))

	end, _ = _walk("=")
	checks.append(("equals on an empty buffer keeps it empty", end.display == "" and not end.error))

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_keypad_checks.py
	#   python regression_keypad_checks.py --inspect "3*-4*-5="
	#   python regression_keypad_checks.py --inspect "5/0=7" --show 5
	if "--inspect" in sys.argv:
		try:
			keys = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")

		def _read_int(flag: str, default: int) -> int:
			if flag not in sys.argv:
				return default
			idx = sys.argv.index(flag)
			try:
				return int(sys.argv[idx + 1])
			except (ValueError, IndexError):
				raise SystemExit(f"Invalid value for {flag}")

		inspect_keys(keys, show=_read_int("--show", 10))
	else:
		run_regressions()
