"""Error types shared by media components, with localized messages."""

from __future__ import annotations

_DEFAULT_LANGUAGE = "en"

_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "error.unknown_enum": "Unknown enum value.",
        "error.connection_closed": "Connection closed.",
        "error.invalid_argument": "Invalid argument.",
        "error.argument_out_of_range": "Argument out of range.",
        "error.buffer_too_small": "Buffer too small.",
    },
    "de": {
        "error.unknown_enum": "Unbekannter Enum-Wert.",
        "error.connection_closed": "Verbindung geschlossen.",
        "error.invalid_argument": "Ungültiges Argument.",
        "error.argument_out_of_range": "Argument außerhalb des gültigen Bereichs.",
        "error.buffer_too_small": "Puffer zu klein.",
    },
    "fi": {
        "error.unknown_enum": "Tuntematon enum-arvo.",
        "error.connection_closed": "Yhteys on suljettu.",
        "error.invalid_argument": "Virheellinen argumentti.",
        "error.argument_out_of_range": "Argumentti on sallitun alueen ulkopuolella.",
        "error.buffer_too_small": "Puskuri on liian pieni.",
    },
    "sv": {
        "error.unknown_enum": "Okänt enum-värde.",
        "error.connection_closed": "Anslutningen är stängd.",
        "error.invalid_argument": "Ogiltigt argument.",
        "error.argument_out_of_range": "Argumentet är utanför giltigt intervall.",
        "error.buffer_too_small": "Bufferten är för liten.",
    },
    "es": {
        "error.unknown_enum": "Valor de enumeración desconocido.",
        "error.connection_closed": "Conexión cerrada.",
        "error.invalid_argument": "Argumento no válido.",
        "error.argument_out_of_range": "Argumento fuera de rango.",
        "error.buffer_too_small": "El búfer es demasiado pequeño.",
    },
    "et": {
        "error.unknown_enum": "Tundmatu enum-väärtus.",
        "error.connection_closed": "Ühendus suletud.",
        "error.invalid_argument": "Vigane argument.",
        "error.argument_out_of_range": "Argument väljaspool lubatud vahemikku.",
        "error.buffer_too_small": "Puhver on liiga väike.",
    },
}


def _message_table(language: str | None) -> dict[str, str]:
    if language:
        tag = language.strip().replace("_", "-").lower()
        for candidate in (tag, tag.split("-", 1)[0]):
            table = _MESSAGES.get(candidate)
            if table is not None:
                return table
    return _MESSAGES[_DEFAULT_LANGUAGE]


def translate(key: str, language: str | None = _DEFAULT_LANGUAGE) -> str:
    """Return the message for ``key`` in ``language``.

    Unsupported languages fall back to English; an unknown key is returned as is.
    """
    return _message_table(language).get(key, key)


class GXError(Exception):
    """Base class of all errors raised by media components."""

    key = ""
    message = "media error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(self._compose(self.message))

    def _compose(self, text: str) -> str:
        if self.detail is None:
            return text
        return f"{text.rstrip('.')}: {self.detail}"

    def localized(self, language: str | None = _DEFAULT_LANGUAGE) -> str:
        """Return the error message in the given language."""
        text = translate(self.key, language) if self.key else self.message
        return self._compose(text)


class UnknownEnumError(GXError, ValueError):
    """An enumeration name or value is not known."""

    key = "error.unknown_enum"
    message = "unknown enum value"


class ConnectionClosedError(GXError, ConnectionError):
    """The connection is closed."""

    key = "error.connection_closed"
    message = "connection closed"


class InvalidArgumentError(GXError, ValueError):
    """An argument is invalid."""

    key = "error.invalid_argument"
    message = "invalid argument"


class ArgumentOutOfRangeError(GXError, ValueError):
    """An argument is out of its allowed range."""

    key = "error.argument_out_of_range"
    message = "argument out of range"


class BufferTooSmallError(GXError, ValueError):
    """There is not enough data in the buffer."""

    key = "error.buffer_too_small"
    message = "buffer too small"