import pytest

from cadastroescolar.cadastro import Cadastro, CadastroCheioError, Filtro
from cadastroescolar.datas import Data
from cadastroescolar.pessoas import MAX_PESSOAS, Aluno, Pessoa, Professor


@pytest.fixture
def ana():
    return Aluno("Ana Souza", "000.000.000-00", Data(10, 5, 2000), matricula="M1")


@pytest.fixture
def bruno():
    return Professor("Bruno Lima", "111.111.111-11", Data(3, 7, 1980), titulacao="Doutor")


@pytest.fixture
def carla():
    return Aluno("Carla Souza", "222.222.222-22", Data(20, 5, 2001), matricula="M2")


@pytest.fixture
def cadastro(ana, bruno, carla):
    return Cadastro([ana, bruno, carla])


def test_len_and_iter_keep_order(cadastro, ana, bruno, carla):
    assert len(cadastro) == 3
    assert list(cadastro) == [ana, bruno, carla]


def test_default_capacity_is_max():
    assert Cadastro().capacidade == MAX_PESSOAS


def test_adicionar_beyond_capacity_raises(ana, bruno):
    cadastro = Cadastro(capacidade=1)
    cadastro.adicionar(ana)
    assert cadastro.cheio
    with pytest.raises(CadastroCheioError):
        cadastro.adicionar(bruno)
    assert list(cadastro) == [ana]


def test_constructor_beyond_capacity_raises(ana, bruno):
    with pytest.raises(CadastroCheioError):
        Cadastro([ana, bruno], capacidade=1)


def test_adicionar_plain_pessoa_rejected():
    cadastro = Cadastro()
    with pytest.raises(TypeError):
        cadastro.adicionar(Pessoa("Sem Tipo"))
    assert len(cadastro) == 0


@pytest.mark.parametrize(
    "filtro, esperados",
    [
        (Filtro.ALUNO, ["Ana Souza", "Carla Souza"]),
        (Filtro.PROFESSOR, ["Bruno Lima"]),
        (Filtro.TODOS, ["Ana Souza", "Bruno Lima", "Carla Souza"]),
    ],
)
def test_listar_filters(cadastro, filtro, esperados):
    assert [p.nome for p in cadastro.listar(filtro)] == esperados


def test_pesquisar_nome_substring(cadastro, ana, carla):
    assert cadastro.pesquisar_nome("Souza") == [ana, carla]
    assert cadastro.pesquisar_nome("Souza", Filtro.PROFESSOR) == []


def test_pesquisar_nome_case_sensitive(cadastro):
    assert cadastro.pesquisar_nome("souza") == []


def test_pesquisar_nome_empty_matches_all(cadastro):
    assert cadastro.pesquisar_nome("") == list(cadastro)


def test_pesquisar_cpf_exact(cadastro, bruno):
    assert cadastro.pesquisar_cpf("111.111.111-11") == [bruno]
    assert cadastro.pesquisar_cpf("111.111.111-11", Filtro.ALUNO) == []
    assert cadastro.pesquisar_cpf("111.111.111") == []


def test_excluir_cpf_removes_and_returns(cadastro, ana, bruno, carla):
    removido = cadastro.excluir_cpf("000.000.000-00", Filtro.ALUNO)
    assert removido is ana
    assert list(cadastro) == [bruno, carla]


def test_excluir_cpf_respects_filter(cadastro, ana, bruno, carla):
    assert cadastro.excluir_cpf("000.000.000-00", Filtro.PROFESSOR) is None
    assert list(cadastro) == [ana, bruno, carla]


def test_excluir_cpf_removes_only_first_match(ana):
    gemeo = Aluno("Outro", "000.000.000-00", Data(), matricula="M9")
    cadastro = Cadastro([ana, gemeo])
    assert cadastro.excluir_cpf("000.000.000-00") is ana
    assert list(cadastro) == [gemeo]


def test_apagar_by_type(cadastro, bruno):
    assert cadastro.apagar(Filtro.ALUNO) == 2
    assert list(cadastro) == [bruno]


def test_apagar_all(cadastro):
    assert cadastro.apagar(Filtro.TODOS) == 3
    assert len(cadastro) == 0


def test_aniversariantes(cadastro, ana, bruno, carla):
    assert cadastro.aniversariantes(5) == [ana, carla]
    assert cadastro.aniversariantes(7) == [bruno]
    assert cadastro.aniversariantes(1) == []


@pytest.mark.parametrize("mes", [0, 13, -1])
def test_aniversariantes_invalid_month(cadastro, mes):
    with pytest.raises(ValueError):
        cadastro.aniversariantes(mes)


def test_iter_is_snapshot(cadastro):
    for pessoa in cadastro:
        cadastro.excluir_cpf(pessoa.cpf)
    assert len(cadastro) == 0