"""Code point and Morse code conversions.

Morse tokens are separated by single spaces and a word gap is "/".
Characters (or tokens) outside the table pass through unchanged.
"""

MORSE_CODE: dict[str, str] = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "1": ".----", "2": "..---", "3": "...--", "4": "....-", "5": ".....",
    "6": "-....", "7": "--...", "8": "---..", "9": "----.", "0": "-----",
    " ": "/",
}

MORSE_CODE_REVERSE: dict[str, str] = {code: char for char, code in MORSE_CODE.items()}


def to_ascii(text: str) -> str:
    """Code points joined by spaces: "AB" -> "65 66"."""
    return " ".join(str(ord(char)) for char in text)


def from_ascii(text: str) -> str:
    """Inverse of to_ascii. Raises ValueError on a non-numeric token."""
    return "".join(chr(int(code)) for code in text.split(" "))


def to_morse_code(text: str) -> str:
    return " ".join(MORSE_CODE.get(char.upper(), char) for char in text)


def from_morse_code(text: str) -> str:
    return "".join(MORSE_CODE_REVERSE.get(token, token) for token in text.split(" "))
