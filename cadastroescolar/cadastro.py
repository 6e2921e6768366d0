"""In-memory register of students and teachers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from .pessoas import MAX_PESSOAS, Pessoa


class Filtro(Enum):
    """Selects which kinds of person an operation applies to."""

    PROFESSOR = "P"
    ALUNO = "A"
    TODOS = "T"

    def aceita(self, pessoa: Pessoa) -> bool:
        """Return whether ``pessoa`` passes this filter."""
        if self is Filtro.TODOS:
            return True
        return pessoa.tipo is not None and pessoa.tipo.value == self.value


class CadastroCheioError(Exception):
    """The register already holds its maximum number of people."""


class Cadastro:
    """An ordered collection of people with a fixed capacity."""

    def __init__(self, pessoas: Iterable[Pessoa] = (), capacidade: int = MAX_PESSOAS) -> None:
        self.capacidade = capacidade
        self._pessoas: list[Pessoa] = []
        for pessoa in pessoas:
            self.adicionar(pessoa)

    @property
    def cheio(self) -> bool:
        """Whether no more people can be added."""
        return len(self._pessoas) >= self.capacidade

    def adicionar(self, pessoa: Pessoa) -> None:
        """Append a student or teacher to the register."""
        if self.cheio:
            raise CadastroCheioError("Limite maximo de cadastros atingido")
        if pessoa.tipo is None:
            raise TypeError(f"tipo de pessoa nao suportado: {type(pessoa).__name__}")
        self._pessoas.append(pessoa)

    def listar(self, filtro: Filtro = Filtro.TODOS) -> list[Pessoa]:
        """Return the people accepted by ``filtro``, in register order."""
        return [pessoa for pessoa in self._pessoas if filtro.aceita(pessoa)]

    def pesquisar_nome(self, nome: str, filtro: Filtro = Filtro.TODOS) -> list[Pessoa]:
        """Return the people whose name contains ``nome`` (case-sensitive)."""
        return [pessoa for pessoa in self.listar(filtro) if nome in pessoa.nome]

    def pesquisar_cpf(self, cpf: str, filtro: Filtro = Filtro.TODOS) -> list[Pessoa]:
        """Return the people whose CPF equals ``cpf``."""
        return [pessoa for pessoa in self.listar(filtro) if pessoa.cpf == cpf]

    def excluir_cpf(self, cpf: str, filtro: Filtro = Filtro.TODOS) -> Pessoa | None:
        """Remove the first matching person with ``cpf``; return it, or None."""
        for indice, pessoa in enumerate(self._pessoas):
            if filtro.aceita(pessoa) and pessoa.cpf == cpf:
                del self._pessoas[indice]
                return pessoa
        return None

    def apagar(self, filtro: Filtro = Filtro.TODOS) -> int:
        """Remove every person accepted by ``filtro``; return how many."""
        restantes = [pessoa for pessoa in self._pessoas if not filtro.aceita(pessoa)]
        removidos = len(self._pessoas) - len(restantes)
        self._pessoas = restantes
        return removidos

    def aniversariantes(self, mes: int) -> list[Pessoa]:
        """Return the people born in month ``mes`` (1-12)."""
        if not 1 <= mes <= 12:
            raise ValueError(f"mes invalido: {mes}")
        return [pessoa for pessoa in self._pessoas if pessoa.nascimento.mesmo_mes(mes)]

    def __len__(self) -> int:
        return len(self._pessoas)

    def __iter__(self) -> Iterator[Pessoa]:
        return iter(list(self._pessoas))