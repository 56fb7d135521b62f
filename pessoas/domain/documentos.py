"""Domain helpers for CPF/CNPJ documents."""
from __future__ import annotations

import re

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_NON_DIGITS = re.compile(r"\D")
_CPF_PATTERN = re.compile(r"(\d{3})(\d{3})(\d{3})(\d{2})")
_CNPJ_PATTERN = re.compile(r"(\d{2})(\d{3})(\d{3})(\d{4})(\d{2})")


def only_digits(value: str | None) -> str:
    """Strip everything but digits (``"123.456.789-01"`` -> ``"12345678901"``)."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def format_cpf(value: str | None) -> str:
    """
    Formata CPF como xxx.xxx.xxx-xx.

    Valores vazios viram "", valores sem 11 digitos voltam sem alteracao.
    """
    if not value:
        return ""
    digits = only_digits(value)
    if len(digits) != CPF_LENGTH:
        return value
    return _CPF_PATTERN.sub(r"\1.\2.\3-\4", digits)


def format_cnpj(value: str | None) -> str:
    """Formata CNPJ como xx.xxx.xxx/xxxx-xx (mesmas regras de format_cpf)."""
    if not value:
        return ""
    digits = only_digits(value)
    if len(digits) != CNPJ_LENGTH:
        return value
    return _CNPJ_PATTERN.sub(r"\1.\2.\3/\4-\5", digits)
