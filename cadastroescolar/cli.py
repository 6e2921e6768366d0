"""Interactive text menu for the school register."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from os import PathLike
from pathlib import Path
from typing import TextIO

from .arquivo import ARQUIVO_PADRAO, ArquivoInvalidoError, carregar, gravar
from .cadastro import Cadastro, CadastroCheioError, Filtro
from .datas import Data, data_valida
from .pessoas import Aluno, Pessoa, Professor, Tipo, cpf_valido

_MENU = (
    "\n========== MENU PRINCIPAL ==========\n"
    "0 - Sair do programa\n"
    "1 - Cadastrar pessoa\n"
    "2 - Listar pessoas\n"
    "3 - Pesquisar por nome\n"
    "4 - Pesquisar por CPF\n"
    "5 - Excluir pessoa\n"
    "6 - Apagar todos os registros\n"
    "7 - Aniversariantes do mes\n"
    "Escolha uma opcao: "
)

_SEPARADOR_LISTA = "-------------------------------------"
_SEPARADOR_PESQUISA = "---------------------------"


class Console:
    """Runs the main menu loop over text streams, persisting to a data file."""

    def __init__(
        self,
        caminho: str | PathLike[str] = ARQUIVO_PADRAO,
        entrada: TextIO | None = None,
        saida: TextIO | None = None,
        hoje: Data | None = None,
    ) -> None:
        self.caminho = Path(caminho)
        self.entrada = entrada if entrada is not None else sys.stdin
        self.saida = saida if saida is not None else sys.stdout
        self.hoje = hoje
        self.cadastro = Cadastro()
        self._acoes: dict[int, Callable[[], None]] = {
            1: self._submenu_cadastro,
            2: self._submenu_listagem,
            3: self._submenu_pesquisa_nome,
            4: self._submenu_pesquisa_cpf,
            5: self._submenu_excluir,
            6: self._submenu_apagar,
            7: self._aniversariantes,
        }

    def executar(self) -> None:
        """Load the register, run the menu until exit or end of input, then save."""
        self._abertura()
        try:
            while True:
                opcao = self._ler_inteiro(_MENU)
                if opcao == 0:
                    break
                acao = self._acoes.get(opcao) if opcao is not None else None
                if acao is None:
                    self._escrever("Opcao invalida! Tente novamente.\n")
                else:
                    acao()
        except EOFError:
            pass
        gravar(self.cadastro, self.caminho)
        self._escrever("\nPrograma finalizado.\n")

    # --- input/output helpers ---

    def _escrever(self, texto: str) -> None:
        self.saida.write(texto)

    def _ler(self, prompt: str) -> str:
        self._escrever(prompt)
        self.saida.flush()
        linha = self.entrada.readline()
        if not linha:
            raise EOFError
        return linha.rstrip("\r\n")

    def _ler_inteiro(self, prompt: str) -> int | None:
        try:
            return int(self._ler(prompt).strip())
        except ValueError:
            return None

    def _escolha(self, menu: str, opcoes: dict[str, Callable[[], None]]) -> None:
        escolha = self._ler(menu).strip()
        acao = opcoes.get(escolha)
        if acao is not None:
            acao()

    def _mostrar(self, pessoa: Pessoa, separador: str) -> None:
        self._escrever(f"\n{pessoa.descricao(self.hoje)}\n\n{separador}\n")

    # --- startup ---

    def _abertura(self) -> None:
        try:
            pessoas = carregar(self.caminho)
        except ArquivoInvalidoError as erro:
            self._escrever(f"Arquivo de dados invalido ({erro}); iniciando vazio.\n")
            pessoas = []
        self.cadastro = Cadastro(pessoas)
        self._escrever(f"Sistema iniciado. {len(self.cadastro)} registros carregados.\n")

    # --- submenus ---

    def _submenu_cadastro(self) -> None:
        self._escolha(
            "\n1.0 - Voltar\n1.1 - Cadastrar Professor\n1.2 - Cadastrar Aluno\nEscolha: ",
            {
                "1.1": lambda: self._cadastrar(Tipo.PROFESSOR),
                "1.2": lambda: self._cadastrar(Tipo.ALUNO),
            },
        )

    def _submenu_listagem(self) -> None:
        self._escolha(
            "\n2.0 - Voltar\n2.1 - Listar Professores\n2.2 - Listar Alunos"
            "\n2.3 - Listar Todos\nEscolha: ",
            {
                "2.1": lambda: self._listar(Filtro.PROFESSOR),
                "2.2": lambda: self._listar(Filtro.ALUNO),
                "2.3": lambda: self._listar(Filtro.TODOS),
            },
        )

    def _submenu_pesquisa_nome(self) -> None:
        self._escolha(
            "\n3.0 - Voltar\n3.1 - Pesquisar Professor\n3.2 - Pesquisar Aluno"
            "\n3.3 - Pesquisar em Todos\nEscolha: ",
            {
                "3.1": lambda: self._pesquisar_nome(Filtro.PROFESSOR),
                "3.2": lambda: self._pesquisar_nome(Filtro.ALUNO),
                "3.3": lambda: self._pesquisar_nome(Filtro.TODOS),
            },
        )

    def _submenu_pesquisa_cpf(self) -> None:
        self._escolha(
            "\n4.0 - Voltar\n4.1 - Pesquisar Professor\n4.2 - Pesquisar Aluno"
            "\n4.3 - Pesquisar em Todos\nEscolha: ",
            {
                "4.1": lambda: self._pesquisar_cpf(Filtro.PROFESSOR),
                "4.2": lambda: self._pesquisar_cpf(Filtro.ALUNO),
                "4.3": lambda: self._pesquisar_cpf(Filtro.TODOS),
            },
        )

    def _submenu_excluir(self) -> None:
        self._escolha(
            "\n5.0 - Voltar\n5.1 - Excluir Professor (pelo CPF)"
            "\n5.2 - Excluir Aluno (pelo CPF)\nEscolha: ",
            {
                "5.1": lambda: self._excluir(Filtro.PROFESSOR),
                "5.2": lambda: self._excluir(Filtro.ALUNO),
            },
        )

    def _submenu_apagar(self) -> None:
        self._escolha(
            "\n6.0 - Voltar\n6.1 - Apagar TODOS os Professores\n6.2 - Apagar TODOS os Alunos"
            "\n6.3 - Apagar TUDO\nEscolha: ",
            {
                "6.1": lambda: self._apagar(Filtro.PROFESSOR),
                "6.2": lambda: self._apagar(Filtro.ALUNO),
                "6.3": lambda: self._apagar(Filtro.TODOS),
            },
        )

    # --- operations ---

    def _ler_data(self) -> Data:
        while True:
            dia = self._ler_inteiro("Dia: ")
            mes = self._ler_inteiro("Mes: ")
            ano = self._ler_inteiro("Ano: ")
            if None not in (dia, mes, ano) and data_valida(dia, mes, ano):
                return Data(dia, mes, ano)
            self._escrever("Data invalida! Tente novamente.\n")

    def _ler_pessoa(self, tipo: Tipo) -> Pessoa:
        nome = self._ler("Nome: ")
        cpf = self._ler("CPF (formato 000.000.000-00): ")
        while not cpf_valido(cpf):
            cpf = self._ler("CPF (formato 000.000.000-00): ")
        self._escrever("Data de nascimento:\n")
        nascimento = self._ler_data()
        if tipo is Tipo.ALUNO:
            matricula = self._ler("Matricula: ")
            return Aluno(nome, cpf, nascimento, matricula=matricula)
        titulacao = self._ler("Titulacao (Especialista, Mestre, Doutor): ")
        return Professor(nome, cpf, nascimento, titulacao=titulacao)

    def _cadastrar(self, tipo: Tipo) -> None:
        if self.cadastro.cheio:
            self._escrever("Erro: Limite maximo de cadastros atingido!\n")
            return
        self._escrever(f"\n--- Cadastro de {tipo.rotulo} ---\n")
        pessoa = self._ler_pessoa(tipo)
        try:
            self.cadastro.adicionar(pessoa)
        except CadastroCheioError:
            self._escrever("Erro: Limite maximo de cadastros atingido!\n")
            return
        self._escrever("Cadastro realizado com sucesso!\n")

    def _listar(self, filtro: Filtro) -> None:
        if len(self.cadastro) == 0:
            self._escrever("Nenhum registro cadastrado.\n")
            return
        encontrados = self.cadastro.listar(filtro)
        for pessoa in encontrados:
            self._mostrar(pessoa, _SEPARADOR_LISTA)
        if not encontrados:
            self._escrever("Nenhum registro do tipo especificado encontrado.\n")

    def _mostrar_resultados(self, encontrados: list[Pessoa]) -> None:
        for pessoa in encontrados:
            self._mostrar(pessoa, _SEPARADOR_PESQUISA)
        if not encontrados:
            self._escrever("Nenhum registro encontrado.\n")

    def _pesquisar_nome(self, filtro: Filtro) -> None:
        nome = self._ler("Digite o nome para pesquisar: ")
        self._mostrar_resultados(self.cadastro.pesquisar_nome(nome, filtro))

    def _pesquisar_cpf(self, filtro: Filtro) -> None:
        cpf = self._ler("Digite o CPF para pesquisar (000.000.000-00): ")
        self._mostrar_resultados(self.cadastro.pesquisar_cpf(cpf, filtro))

    def _excluir(self, filtro: Filtro) -> None:
        cpf = self._ler("Digite o CPF do registro a ser excluido: ")
        if self.cadastro.excluir_cpf(cpf, filtro) is not None:
            self._escrever("Registro excluido com sucesso!\n")
        else:
            self._escrever(
                "Nenhum registro encontrado com este CPF para o tipo selecionado.\n"
            )

    def _apagar(self, filtro: Filtro) -> None:
        resposta = self._ler("TEM CERTEZA? (S/N): ").strip()
        if resposta[:1].upper() != "S":
            self._escrever("Operacao cancelada.\n")
            return
        self.cadastro.apagar(filtro)
        self._escrever("Registros excluidos.\n")

    def _aniversariantes(self) -> None:
        mes = self._ler_inteiro("Digite o mes para pesquisar (1-12): ")
        if mes is None or not 1 <= mes <= 12:
            self._escrever("Mes invalido.\n")
            return
        self._escrever(f"\n--- Aniversariantes do Mes {mes} ---\n")
        encontrados = self.cadastro.aniversariantes(mes)
        for pessoa in encontrados:
            rotulo = "Aluno" if pessoa.tipo is Tipo.ALUNO else "Professor"
            self._escrever(f"{rotulo}: {pessoa.nome} (Dia {pessoa.nascimento.dia})\n")
        if not encontrados:
            self._escrever("Nenhum aniversariante encontrado.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive register."""
    parser = argparse.ArgumentParser(
        prog="cadastroescolar", description="Cadastro de alunos e professores."
    )
    parser.add_argument(
        "--arquivo", default=ARQUIVO_PADRAO, help="arquivo de dados (padrao: %(default)s)"
    )
    args = parser.parse_args(argv)
    Console(args.arquivo).executar()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())