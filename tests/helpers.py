FAKE_TRIALS = 500


def only_digits(value: str) -> str:
    return "".join(ch for ch in value if ch.isdigit())


def flip_digit(value: str, index: int, delta: int) -> str:
    digit = (int(value[index]) + delta) % 10
    return f"{value[:index]}{digit}{value[index + 1:]}"
