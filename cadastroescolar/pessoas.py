"""People in the school register: students and teachers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from .datas import Data, calcular_idade

MAX_PESSOAS = 100


class Tipo(Enum):
    """Kind of person, stored in files by its one-letter code."""

    ALUNO = "A"
    PROFESSOR = "P"

    @property
    def rotulo(self) -> str:
        return "Aluno" if self is Tipo.ALUNO else "Professor"


def cpf_valido(cpf: str) -> bool:
    """Return whether ``cpf`` has the shape 000.000.000-00."""
    return len(cpf) == 14 and cpf[3] == "." and cpf[7] == "." and cpf[11] == "-"


@dataclass
class Pessoa:
    """A person with name, CPF and birth date.

    The CPF is either empty or in the 000.000.000-00 format; any other
    value raises ``ValueError``.
    """

    nome: str = ""
    cpf: str = ""
    nascimento: Data = field(default_factory=Data)

    tipo: ClassVar[Tipo | None] = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "cpf" and value and not cpf_valido(value):
            raise ValueError(f"CPF invalido: {value!r}")
        super().__setattr__(name, value)

    def idade(self, hoje: Data | None = None) -> int:
        """Age in whole years on ``hoje`` (today by default)."""
        return calcular_idade(self.nascimento, hoje)

    def descricao(self, hoje: Data | None = None) -> str:
        """Multi-line description of the person."""
        return "\n".join(
            [
                f"Nome: {self.nome}",
                f"CPF: {self.cpf}",
                f"Nascimento: {self.nascimento}",
                f"Idade: {self.idade(hoje)}",
            ]
        )


@dataclass
class Aluno(Pessoa):
    """A student, identified also by an enrolment number."""

    matricula: str = ""

    tipo: ClassVar[Tipo | None] = Tipo.ALUNO

    def descricao(self, hoje: Data | None = None) -> str:
        return f"{super().descricao(hoje)}\nTipo: Aluno\nMatricula: {self.matricula}"


@dataclass
class Professor(Pessoa):
    """A teacher with an academic title."""

    titulacao: str = ""

    tipo: ClassVar[Tipo | None] = Tipo.PROFESSOR

    def descricao(self, hoje: Data | None = None) -> str:
        return f"{super().descricao(hoje)}\nTipo: Professor\nTitulacao: {self.titulacao}"