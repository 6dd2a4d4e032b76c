import pytest

from haulbook.middleware.exceptions import DuplicateRecordError, StoreError, ValidationFailure
from haulbook.persistence import InMemoryStore
from haulbook.schemas.customers import CustomerCreate
from haulbook.services.customers import code_number, create_customer, next_customer_code


def test_next_code_starts_at_one_without_matches() -> None:
    assert next_customer_code([]) == "C000001"
    assert next_customer_code([None, "", "X-77", "legacy"]) == "C000001"


def test_next_code_takes_max_of_matched_suffixes() -> None:
    codes = ["C000003", "C000010", "C000002", "VIP", None]
    assert next_customer_code(codes) == "C000011"


def test_code_number_requires_exactly_six_digits() -> None:
    assert code_number("C000123") == 123
    assert code_number("old-C000042") == 42
    assert code_number("C12345") is None
    assert code_number("C1234567") is None


def test_next_code_fails_when_width_is_exhausted() -> None:
    with pytest.raises(StoreError):
        next_customer_code(["C999999"])


def test_next_code_honours_custom_prefix_and_width() -> None:
    assert next_customer_code(["K0041", "C000900"], prefix="K", digits=4) == "K0042"


def test_create_customer_rejects_blank_name_before_store_access() -> None:
    class ExplodingStore(InMemoryStore):
        def recent_customer_codes(self, limit):
            raise AssertionError("store must not be touched")

    with pytest.raises(ValidationFailure):
        create_customer(ExplodingStore(), CustomerCreate(name="   "))


def test_sequential_creations_get_consecutive_codes() -> None:
    store = InMemoryStore()

    first = create_customer(store, CustomerCreate(name="Yamada Transport"))
    second = create_customer(store, CustomerCreate(name="Suzuki Logistics"))

    assert first.code == "C000001"
    assert second.code == "C000002"
    assert code_number(second.code) == code_number(first.code) + 1


def test_explicit_code_is_used_verbatim_after_trim() -> None:
    store = InMemoryStore()
    customer = create_customer(store, CustomerCreate(name="Acme", code="  C000500 "))
    assert customer.code == "C000500"

    following = create_customer(store, CustomerCreate(name="Beta"))
    assert following.code == "C000501"


def test_lookback_window_limits_scanned_codes() -> None:
    store = InMemoryStore()
    create_customer(store, CustomerCreate(name="Old", code="C000900"))
    for index in range(3):
        create_customer(store, CustomerCreate(name=f"Manual {index}", code=f"M{index}"))

    # The old high number falls outside a window of three.
    customer = create_customer(store, CustomerCreate(name="New"), lookback=3)
    assert customer.code == "C000001"


def test_duplicate_code_surfaces_store_error_without_retry() -> None:
    store = InMemoryStore()
    create_customer(store, CustomerCreate(name="Acme", code="C000001"))

    with pytest.raises(DuplicateRecordError):
        create_customer(store, CustomerCreate(name="Other", code="C000001"))
    assert len(store.list_customers()) == 1


def test_blank_optional_fields_are_normalized_to_none() -> None:
    store = InMemoryStore()
    customer = create_customer(
        store,
        CustomerCreate(name=" Acme ", kana=" ", phone="03-1234-5678 ", email="", note=None),
    )
    assert customer.name == "Acme"
    assert customer.kana is None
    assert customer.phone == "03-1234-5678"
    assert customer.email is None
    assert customer.is_active is True
