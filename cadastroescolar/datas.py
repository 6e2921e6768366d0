"""Calendar dates used for birth dates and age calculation."""

from __future__ import annotations

import datetime
from dataclasses import dataclass


def data_valida(dia: int, mes: int, ano: int) -> bool:
    """Return whether the day and month are within the accepted ranges.

    The check is deliberately simple: any day from 1 to 31 is accepted
    for any month, and every year is accepted.
    """
    return 1 <= mes <= 12 and 1 <= dia <= 31


@dataclass(frozen=True)
class Data:
    """A day/month/year date; defaults to 1/1/1900."""

    dia: int = 1
    mes: int = 1
    ano: int = 1900

    def __post_init__(self) -> None:
        if not data_valida(self.dia, self.mes, self.ano):
            raise ValueError(f"data invalida: {self.dia}/{self.mes}/{self.ano}")

    def mesmo_mes(self, mes: int) -> bool:
        """Return whether this date falls in the given month."""
        return self.mes == mes

    def __str__(self) -> str:
        return f"{self.dia}/{self.mes}/{self.ano}"


def data_atual() -> Data:
    """Return today's date in local time."""
    hoje = datetime.date.today()
    return Data(hoje.day, hoje.month, hoje.year)


def calcular_idade(nascimento: Data, hoje: Data | None = None) -> int:
    """Return the age in whole years on ``hoje`` (today by default)."""
    if hoje is None:
        hoje = data_atual()
    idade = hoje.ano - nascimento.ano
    if (hoje.mes, hoje.dia) < (nascimento.mes, nascimento.dia):
        idade -= 1
    return idade