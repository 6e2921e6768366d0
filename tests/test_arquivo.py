import struct

import pytest

from cadastroescolar.arquivo import (
    ArquivoInvalidoError,
    carregar,
    desserializar,
    gravar,
    serializar,
)
from cadastroescolar.datas import Data
from cadastroescolar.pessoas import Aluno, Pessoa, Professor

CPF_A = "111.222.333-44"
CPF_B = "555.666.777-88"


def _pessoas():
    return [
        Aluno("Ana Souza", CPF_A, Data(3, 4, 2005), matricula="2024001"),
        Professor("Rui Costa", CPF_B, Data(12, 11, 1975), titulacao="Doutor"),
        Aluno("Joao", "", Data(), matricula=""),
    ]


def _texto(valor: bytes) -> bytes:
    return struct.pack("<Q", len(valor)) + valor


def test_empty_register_is_just_a_zero_count():
    assert serializar([]) == b"\x00\x00\x00\x00"
    assert desserializar(serializar([])) == []


def test_record_layout():
    dados = serializar([Aluno("Ana", CPF_A, Data(3, 4, 2005), matricula="M1")])
    esperado = (
        struct.pack("<i", 1)
        + b"A"
        + _texto(b"Ana")
        + _texto(CPF_A.encode())
        + struct.pack("<iii", 3, 4, 2005)
        + _texto(b"M1")
    )
    assert dados == esperado


def test_round_trip():
    pessoas = _pessoas()
    assert desserializar(serializar(pessoas)) == pessoas


def test_round_trip_non_ascii_names():
    pessoas = [Professor("Conceição Araújo", CPF_A, Data(1, 1, 1960), titulacao="Mestre")]
    assert desserializar(serializar(pessoas)) == pessoas


def test_gravar_and_carregar(tmp_path):
    caminho = tmp_path / "pessoas.dat"
    gravar(_pessoas(), caminho)
    assert carregar(caminho) == _pessoas()


def test_carregar_missing_file_is_empty(tmp_path):
    assert carregar(tmp_path / "nao_existe.dat") == []


@pytest.mark.parametrize("contagem", [-1, 101])
def test_out_of_range_count_gives_empty(contagem):
    dados = struct.pack("<i", contagem) + serializar(_pessoas())[4:]
    assert desserializar(dados) == []


def test_short_header_gives_empty():
    assert desserializar(b"\x01\x00") == []


def test_count_larger_than_records_keeps_those_read():
    pessoas = _pessoas()[:2]
    dados = struct.pack("<i", 5) + serializar(pessoas)[4:]
    assert desserializar(dados) == pessoas


def test_truncated_inside_record_raises():
    dados = serializar(_pessoas())
    with pytest.raises(ArquivoInvalidoError):
        desserializar(dados[:-3])


def test_unknown_record_type_raises():
    dados = struct.pack("<i", 1) + b"X" + _texto(b"Nome")
    with pytest.raises(ArquivoInvalidoError):
        desserializar(dados)


def test_overlong_string_raises():
    dados = struct.pack("<i", 1) + b"A" + struct.pack("<Q", 5000)
    with pytest.raises(ArquivoInvalidoError):
        desserializar(dados)


def test_invalid_date_raises():
    dados = (
        struct.pack("<i", 1)
        + b"P"
        + _texto(b"Rui")
        + _texto(CPF_B.encode())
        + struct.pack("<iii", 10, 13, 1980)
        + _texto(b"Mestre")
    )
    with pytest.raises(ArquivoInvalidoError):
        desserializar(dados)


def test_invalid_cpf_in_file_loads_as_empty():
    dados = (
        struct.pack("<i", 1)
        + b"A"
        + _texto(b"Ana")
        + _texto(b"12345")
        + struct.pack("<iii", 3, 4, 2005)
        + _texto(b"M1")
    )
    (pessoa,) = desserializar(dados)
    assert pessoa == Aluno("Ana", "", Data(3, 4, 2005), matricula="M1")


def test_plain_pessoa_cannot_be_serialized():
    with pytest.raises(TypeError):
        serializar([Pessoa("Sem tipo", CPF_A)])