"""Binary storage of the register in a data file."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from .datas import Data
from .pessoas import MAX_PESSOAS, Aluno, Pessoa, Professor, Tipo, cpf_valido

ARQUIVO_PADRAO = "pessoas.dat"
TAMANHO_MAXIMO_TEXTO = 1024

_CONTAGEM = struct.Struct("<i")
_TAMANHO = struct.Struct("<Q")
_DATA = struct.Struct("<iii")


class ArquivoInvalidoError(ValueError):
    """The data file is corrupt or truncated inside a record."""


def _texto(valor: str) -> bytes:
    codificado = valor.encode("utf-8")
    return _TAMANHO.pack(len(codificado)) + codificado


def _complemento(pessoa: Pessoa) -> str:
    if isinstance(pessoa, Aluno):
        return pessoa.matricula
    if isinstance(pessoa, Professor):
        return pessoa.titulacao
    raise TypeError(f"tipo de pessoa nao suportado: {type(pessoa).__name__}")


def serializar(pessoas: Iterable[Pessoa]) -> bytes:
    """Encode people as a record count followed by one record each."""
    pessoas = list(pessoas)
    partes = [_CONTAGEM.pack(len(pessoas))]
    for pessoa in pessoas:
        complemento = _complemento(pessoa)
        nascimento = pessoa.nascimento
        partes += [
            pessoa.tipo.value.encode("ascii"),
            _texto(pessoa.nome),
            _texto(pessoa.cpf),
            _DATA.pack(nascimento.dia, nascimento.mes, nascimento.ano),
            _texto(complemento),
        ]
    return b"".join(partes)


class _Leitor:
    def __init__(self, dados: bytes, posicao: int) -> None:
        self._dados = dados
        self._posicao = posicao

    @property
    def no_fim(self) -> bool:
        return self._posicao >= len(self._dados)

    def ler(self, quantidade: int) -> bytes:
        fim = self._posicao + quantidade
        if fim > len(self._dados):
            raise ArquivoInvalidoError("arquivo truncado")
        trecho = self._dados[self._posicao:fim]
        self._posicao = fim
        return trecho

    def texto(self) -> str:
        (tamanho,) = _TAMANHO.unpack(self.ler(_TAMANHO.size))
        if tamanho > TAMANHO_MAXIMO_TEXTO:
            raise ArquivoInvalidoError(f"texto longo demais: {tamanho} bytes")
        try:
            return self.ler(tamanho).decode("utf-8")
        except UnicodeDecodeError as erro:
            raise ArquivoInvalidoError("texto com codificacao invalida") from erro


def desserializar(dados: bytes) -> list[Pessoa]:
    """Decode people written by :func:`serializar`.

    A missing or out-of-range record count gives an empty list; a file
    that ends exactly between records keeps the records read so far.
    Invalid CPFs are loaded as empty.
    """
    if len(dados) < _CONTAGEM.size:
        return []
    (total,) = _CONTAGEM.unpack_from(dados)
    if total < 0 or total > MAX_PESSOAS:
        return []

    leitor = _Leitor(dados, _CONTAGEM.size)
    pessoas: list[Pessoa] = []
    for _ in range(total):
        if leitor.no_fim:
            break
        codigo = leitor.ler(1)
        try:
            tipo = Tipo(codigo.decode("ascii"))
        except ValueError as erro:
            raise ArquivoInvalidoError(f"tipo de registro desconhecido: {codigo!r}") from erro
        nome = leitor.texto()
        cpf = leitor.texto()
        dia, mes, ano = _DATA.unpack(leitor.ler(_DATA.size))
        try:
            nascimento = Data(dia, mes, ano)
        except ValueError as erro:
            raise ArquivoInvalidoError(str(erro)) from erro
        complemento = leitor.texto()
        if not cpf_valido(cpf):
            cpf = ""
        if tipo is Tipo.ALUNO:
            pessoas.append(Aluno(nome, cpf, nascimento, matricula=complemento))
        else:
            pessoas.append(Professor(nome, cpf, nascimento, titulacao=complemento))
    return pessoas


def gravar(pessoas: Iterable[Pessoa], caminho: str | PathLike[str] = ARQUIVO_PADRAO) -> None:
    """Write people to the data file, replacing its contents."""
    Path(caminho).write_bytes(serializar(pessoas))


def carregar(caminho: str | PathLike[str] = ARQUIVO_PADRAO) -> list[Pessoa]:
    """Read people from the data file; a missing file gives an empty list."""
    try:
        dados = Path(caminho).read_bytes()
    except FileNotFoundError:
        return []
    return desserializar(dados)