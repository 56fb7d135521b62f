"""
Active-pessoa listing and lookup against a temporary SQLite database.
"""
from __future__ import annotations

import itertools

import pytest

from conftest import make_pessoa
from pessoas import InvalidArgument, PessoaActiveQueryService


def ids(page):
    return [p.id for p in page.content]


def test_scenario_first_page(scenario):
    page = PessoaActiveQueryService().list_active(0, 2)
    assert ids(page) == [1, 2]
    assert page.total_elements == 3
    assert page.total_pages == 2
    assert page.number == 0
    assert page.size == 2
    assert page.first and not page.last


def test_scenario_second_page(scenario):
    page = PessoaActiveQueryService().list_active(1, 2)
    assert ids(page) == [3]
    assert page.total_elements == 3
    assert page.last and not page.first


def test_page_past_the_end_is_empty_with_total(scenario):
    page = PessoaActiveQueryService().list_active(5, 2)
    assert page.content == []
    assert page.total_elements == 3
    assert page.is_empty


def test_get_active_by_id(scenario):
    svc = PessoaActiveQueryService()
    pessoa = svc.get_active_by_id(1)
    assert pessoa is not None
    assert pessoa.id == 1
    assert pessoa.nome == "Ana Silva"
    assert pessoa.ativo


def test_get_active_by_id_deleted_and_unknown_are_absent(scenario):
    svc = PessoaActiveQueryService()
    assert svc.get_active_by_id(4) is None
    assert svc.get_active_by_id(999) is None


def test_get_active_by_id_accepts_digit_string(scenario):
    pessoa = PessoaActiveQueryService().get_active_by_id(" 2 ")
    assert pessoa is not None and pessoa.id == 2


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", "abc", "1.5", True, 2.0, "\u00b2", "\u2460", "\u0661\u0662", 2**63, -(2**63) - 1, str(2**64)],
)
def test_get_active_by_id_rejects_invalid(temp_db, value):
    with pytest.raises(InvalidArgument) as info:
        PessoaActiveQueryService().get_active_by_id(value)
    assert info.value.field == "id"


@pytest.mark.parametrize(
    "page_number,page_size,field",
    [
        (-1, 10, "page_number"),
        (0, 0, "page_size"),
        (0, -5, "page_size"),
        ("0", 10, "page_number"),
        (0, True, "page_size"),
        (2**62, 10, "page_number"),
        (1, 2**63 - 1, "page_number"),
        (0, 2**63, "page_size"),
    ],
)
def test_list_active_rejects_invalid_paging(temp_db, page_number, page_size, field):
    with pytest.raises(InvalidArgument) as info:
        PessoaActiveQueryService().list_active(page_number, page_size)
    assert info.value.field == field
    assert info.value.code == "INVALID_ARGUMENT"


def test_invalid_arguments_do_not_touch_storage():
    def factory():
        raise AssertionError("session must not be opened")

    svc = PessoaActiveQueryService(session_factory=factory)
    with pytest.raises(InvalidArgument):
        svc.list_active(-1, 10)
    with pytest.raises(InvalidArgument):
        svc.get_active_by_id(None)


def test_full_traversal_returns_each_active_once(seed):
    deleted = {3, 7, 8, 15, 22}
    seed(*(make_pessoa(i, deleted=i in deleted) for i in range(1, 26)))
    expected = [i for i in range(1, 26) if i not in deleted]
    svc = PessoaActiveQueryService()

    for size in (1, 3, 4, 7, 20, 50):
        seen = []
        for number in itertools.count():
            page = svc.list_active(number, size)
            assert page.total_elements == len(expected)
            seen.extend(ids(page))
            if page.last:
                break
        assert seen == expected
        assert not deleted.intersection(seen)


def test_default_page_size_from_settings(seed, monkeypatch):
    from pessoas.core import config as core_config

    seed(*(make_pessoa(i) for i in range(1, 6)))
    monkeypatch.setenv("PESSOA_DEFAULT_PAGE_SIZE", "2")
    core_config.get_settings.cache_clear()

    page = PessoaActiveQueryService().list_active(0)
    assert page.size == 2
    assert ids(page) == [1, 2]
    assert page.total_elements == 5


def test_sort_by_nome_desc_with_id_tiebreak(seed):
    seed(
        make_pessoa(1, "Maria"),
        make_pessoa(2, "Ana"),
        make_pessoa(3, "Maria"),
        make_pessoa(4, "Zeca", deleted=True),
        make_pessoa(5, "Bia"),
    )
    page = PessoaActiveQueryService().list_active(0, 10, sort="nome,desc")
    assert ids(page) == [1, 3, 5, 2]


def test_sort_rejects_unknown_field(temp_db):
    with pytest.raises(InvalidArgument) as info:
        PessoaActiveQueryService().list_active(0, 10, sort="cpf,asc")
    assert info.value.field == "sort"


def test_count_active(scenario):
    assert PessoaActiveQueryService().count_active() == 3


def test_accepts_external_sessionmaker(scenario):
    from sqlalchemy.orm import sessionmaker

    from pessoas.db.session import get_engine

    svc = PessoaActiveQueryService(session_factory=sessionmaker(bind=get_engine()))
    assert ids(svc.list_active(0, 10)) == [1, 2, 3]


@pytest.mark.parametrize("value", [2**63 - 1, -(2**63), -5, 0, str(2**63 - 1)])
def test_get_active_by_id_extreme_ids_match_nothing(scenario, value):
    assert PessoaActiveQueryService().get_active_by_id(value) is None


def test_list_active_largest_representable_page_is_empty(scenario):
    page = PessoaActiveQueryService().list_active(2**62 // 10 - 1, 10)
    assert page.content == []
    assert page.total_elements == 3
