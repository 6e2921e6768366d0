[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cadastroescolar"
version = "1.0.0"
description = "Cadastro de alunos e professores em terminal, com gravação em arquivo binário"
requires-python = ">=3.10"
dependencies = []
keywords = ["cadastro", "escola", "alunos", "professores", "cpf", "aniversariantes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cadastroescolar = "cadastroescolar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cadastroescolar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
