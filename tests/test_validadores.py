import pytest

from app.utils.validadores import (
    formatar_cep,
    formatar_cpf,
    formatar_telefone,
    limpar_numero,
    validar_cep,
    validar_cpf,
    validar_email,
    validar_telefone,
)


@pytest.mark.parametrize(
    "cpf, esperado",
    [
        ("11144477735", True),
        ("111.444.777-35", True),
        ("529.982.247-25", True),
        ("12345678909", True),
        ("11111111111", False),
        ("00000000000", False),
        ("12345678900", False),
        ("111.444.777-36", False),
        ("1114447773", False),
        ("111444777350", False),
        ("", False),
    ],
)
def test_validar_cpf(cpf, esperado):
    assert validar_cpf(cpf) is esperado


def test_formatar_cpf_preserva_digitos():
    assert formatar_cpf("11144477735") == "111.444.777-35"
    assert limpar_numero(formatar_cpf("52998224725")) == "52998224725"


@pytest.mark.parametrize(
    "telefone, esperado",
    [
        ("11987654321", True),
        ("(11) 98765-4321", True),
        ("1187654321", True),
        ("(11) 3456-7890", True),
        ("119999999", False),
        ("00912345678", False),
        ("10987654321", False),
        ("11887654321", False),
        ("1117654321", False),
        ("99999999999", False),
    ],
)
def test_validar_telefone(telefone, esperado):
    assert validar_telefone(telefone) is esperado


def test_formatar_telefone():
    assert formatar_telefone("11987654321") == "(11) 98765-4321"
    assert formatar_telefone("1134567890") == "(11) 3456-7890"


@pytest.mark.parametrize(
    "email, esperado",
    [
        ("user@example.com", True),
        ("nome.sobrenome@empresa.com.br", True),
        ("user @example.com", False),
        ("userexample.com", False),
        ("user@example", False),
        ("a" * 308 + "@example.com", True),
        ("a" * 309 + "@example.com", False),
        (None, False),
    ],
)
def test_validar_email(email, esperado):
    assert validar_email(email) is esperado


@pytest.mark.parametrize(
    "cep, esperado",
    [
        ("01310-100", True),
        ("01310100", True),
        ("123", False),
        ("013101000", False),
    ],
)
def test_validar_cep(cep, esperado):
    assert validar_cep(cep) is esperado


def test_formatar_cep():
    assert formatar_cep("01310100") == "01310-100"
