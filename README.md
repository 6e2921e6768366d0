# cadastroescolar

Cadastro de pessoas de uma escola (alunos e professores) operado por um
menu no terminal. Os registros ficam num arquivo binário, por padrão
`pessoas.dat` no diretório atual. Eles são carregados ao iniciar e gravados
ao sair, seja pela opção 0 ou pelo fim da entrada.

## Instalação

```
pip install .
```

## Uso

```
cadastroescolar
cadastroescolar --arquivo outro.dat
```

A opção `--arquivo` escolhe o arquivo de dados. Quando ela é omitida, o
arquivo usado é `pessoas.dat`. O menu principal oferece:

```
0 - Sair do programa
1 - Cadastrar pessoa
2 - Listar pessoas
3 - Pesquisar por nome
4 - Pesquisar por CPF
5 - Excluir pessoa
6 - Apagar todos os registros
7 - Aniversariantes do mes
```

Cada opção abre um submenu:

| Submenu | Escolhas |
|---------|----------|
| 1 Cadastrar | `1.1` professor, `1.2` aluno |
| 2 Listar | `2.1` professores, `2.2` alunos, `2.3` todos |
| 3 Pesquisar por nome | `3.1` professor, `3.2` aluno, `3.3` em todos |
| 4 Pesquisar por CPF | `4.1` professor, `4.2` aluno, `4.3` em todos |
| 5 Excluir pelo CPF | `5.1` professor, `5.2` aluno |
| 6 Apagar | `6.1` professores, `6.2` alunos, `6.3` tudo (pede confirmação S/N) |

A opção 7 não tem submenu: ela pede diretamente o mês.

Regras de validação e de busca:

- O CPF deve estar no formato `000.000.000-00`. São conferidos apenas o
  tamanho e a posição dos pontos e do hífen.
- As datas aceitam qualquer dia de 1 a 31 em qualquer mês de 1 a 12.
- O cadastro comporta no máximo 100 pessoas.
- A pesquisa por nome procura o texto digitado dentro do nome e diferencia
  maiúsculas de minúsculas.
- A idade é calculada a partir da data de hoje.

Se o arquivo de dados estiver corrompido, o programa avisa e começa com o
cadastro vazio.

## Uso como biblioteca

```python
from cadastroescolar.datas import Data
from cadastroescolar.pessoas import Aluno, Professor
from cadastroescolar.cadastro import Cadastro, Filtro
from cadastroescolar.arquivo import gravar, carregar

cadastro = Cadastro()
cadastro.adicionar(Aluno(nome="Ana", cpf="000.000.000-00",
                         nascimento=Data(5, 3, 2001), matricula="2024001"))
cadastro.adicionar(Professor(nome="Bruno", cpf="000.000.000-01",
                             nascimento=Data(20, 3, 1980), titulacao="Mestre"))

for pessoa in cadastro.pesquisar_nome("An", Filtro.TODOS):
    print(pessoa.descricao(Data(1, 1, 2025)))

print([p.nome for p in cadastro.aniversariantes(3)])

gravar(cadastro, "pessoas.dat")
pessoas = carregar("pessoas.dat")
```

### Módulos

- `cadastroescolar.datas`:
  - `Data(dia, mes, ano)` é imutável e vale 1/1/1900 por padrão. Uma data
    inválida lança `ValueError`.
  - `data_valida`, `data_atual` e `calcular_idade(nascimento, hoje=None)`
    completam o módulo.
- `cadastroescolar.pessoas`:
  - `Pessoa`, `Aluno` (com `matricula`) e `Professor` (com `titulacao`).
  - O enum `Tipo`, com os códigos `"A"` e `"P"`.
  - `cpf_valido`. Atribuir um CPF fora do formato lança `ValueError`.
- `cadastroescolar.cadastro`:
  - `Cadastro` tem os métodos `adicionar`, `listar`, `pesquisar_nome`,
    `pesquisar_cpf`, `excluir_cpf`, `apagar` e `aniversariantes`, além de
    `len()` e iteração.
  - `Filtro` seleciona pessoas: `PROFESSOR`, `ALUNO` ou `TODOS`.
  - Um cadastro cheio lança `CadastroCheioError`.
- `cadastroescolar.arquivo`:
  - `serializar` e `desserializar` trabalham com bytes.
  - `gravar` e `carregar` trabalham com arquivos. Um arquivo inexistente
    resulta em lista vazia.
  - Um arquivo corrompido ou truncado no meio de um registro lança
    `ArquivoInvalidoError`.
- `cadastroescolar.cli`:
  - `Console` executa o menu sobre fluxos de texto quaisquer.
  - `main` é o ponto de entrada do comando.

## Limitações

- Não há edição de registros: para alterar uma pessoa é preciso excluí-la e
  cadastrá-la de novo.
- O CPF não tem os dígitos verificadores conferidos.

## Testes

```
pip install .[test]
pytest
```