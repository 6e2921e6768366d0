"""Cadastro de alunos e professores com menu em terminal e gravação em arquivo binário."""

__version__ = "1.0.0"