"""
Unit tests for the in-memory contact store
"""

import threading

import pytest

from phonebook.seed import SEED_CONTACTS, create_seeded_store
from phonebook.store import (
    ContactRecord,
    ContactStore,
    DuplicateNameError,
    PhoneFilter,
)


def names(records):
    return [r.name for r in records]


@pytest.mark.unit
class TestCount:
    def test_seeded_store(self, store):
        assert store.count() == 3

    def test_empty_store(self, empty_store):
        assert empty_store.count() == 0


@pytest.mark.unit
class TestListContacts:
    def test_default_returns_all_in_insertion_order(self, store):
        assert names(store.list_contacts()) == [
            "Arto Hellas",
            "Matti Luukkainen",
            "Venla Ruuska",
        ]

    def test_any_and_none_match_default(self, store):
        assert names(store.list_contacts(PhoneFilter.ANY)) == names(store.list_contacts())
        assert names(store.list_contacts(None)) == names(store.list_contacts())

    def test_has_phone(self, store):
        assert names(store.list_contacts(PhoneFilter.HAS_PHONE)) == [
            "Arto Hellas",
            "Matti Luukkainen",
        ]

    def test_no_phone(self, store):
        assert names(store.list_contacts(PhoneFilter.NO_PHONE)) == ["Venla Ruuska"]

    def test_empty_phone_counts_as_no_phone(self, store):
        store.add(name="Pekka", street="Katu 1", city="Turku", phone="")

        assert "Pekka" in names(store.list_contacts(PhoneFilter.NO_PHONE))
        assert "Pekka" not in names(store.list_contacts(PhoneFilter.HAS_PHONE))

    def test_filters_partition_the_directory(self, store):
        store.add(name="Liisa", street="X", city="Y")
        store.add(name="Kalle", street="Z", city="W", phone="050-1")

        with_phone = names(store.list_contacts(PhoneFilter.HAS_PHONE))
        without_phone = names(store.list_contacts(PhoneFilter.NO_PHONE))

        assert with_phone == ["Arto Hellas", "Matti Luukkainen", "Kalle"]
        assert without_phone == ["Venla Ruuska", "Liisa"]
        assert sorted(with_phone + without_phone) == sorted(names(store.list_contacts()))

    def test_returned_records_do_not_alias_the_store(self, store):
        listed = store.list_contacts()
        listed[0].phone = "tampered"
        listed.clear()

        assert store.count() == 3
        assert store.find_by_name("Arto Hellas").phone == "040-123543"


@pytest.mark.unit
class TestFindByName:
    def test_exact_match(self, store):
        record = store.find_by_name("Venla Ruuska")

        assert record is not None
        assert record.id == "3d599471-3436-11e9-bc57-8b80ba54c431"
        assert record.phone is None
        assert record.street == "Nallemäentie 22 C"
        assert record.city == "Helsinki"

    @pytest.mark.parametrize("name", ["venla ruuska", "Venla", "Venla Ruuska ", ""])
    def test_no_partial_or_case_insensitive_match(self, store, name):
        assert store.find_by_name(name) is None


@pytest.mark.unit
class TestAdd:
    def test_add_appends_new_contact(self, store):
        record = store.add(name="Liisa", street="X", city="Y")

        assert store.count() == 4
        assert names(store.list_contacts())[-1] == "Liisa"
        assert record.name == "Liisa"
        assert record.phone is None
        assert record.street == "X"
        assert record.city == "Y"

        found = store.find_by_name("Liisa")
        assert found == record

    def test_add_assigns_unique_ids(self, store):
        first = store.add(name="A", street="s", city="c")
        second = store.add(name="B", street="s", city="c")

        ids = [r.id for r in store.list_contacts()]
        assert first.id
        assert second.id
        assert len(set(ids)) == len(ids)

    def test_add_with_phone(self, empty_store):
        record = empty_store.add(name="Kalle", street="Z", city="W", phone="050-1")

        assert record.phone == "050-1"
        assert empty_store.list_contacts(PhoneFilter.HAS_PHONE) == [record]

    def test_duplicate_name_raises_and_leaves_store_unchanged(self, store):
        store.add(name="Liisa", street="X", city="Y")
        before = store.list_contacts()

        with pytest.raises(DuplicateNameError) as exc_info:
            store.add(name="Liisa", street="Other", city="Place", phone="1")

        assert exc_info.value.name == "Liisa"
        assert "Liisa" in str(exc_info.value)
        assert store.list_contacts() == before

    def test_names_are_case_sensitive(self, store):
        store.add(name="arto hellas", street="X", city="Y")

        assert store.count() == 4

    def test_concurrent_adds_of_same_name_create_one_contact(self, empty_store):
        errors = []

        def worker():
            try:
                empty_store.add(name="Same", street="X", city="Y")
            except DuplicateNameError as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert empty_store.count() == 1
        assert len(errors) == 7


@pytest.mark.unit
class TestEditPhone:
    def test_updates_only_phone(self, store):
        before = store.find_by_name("Venla Ruuska")

        updated = store.edit_phone("Venla Ruuska", "09-1234")

        assert updated is not None
        assert updated.phone == "09-1234"
        assert (updated.id, updated.name, updated.street, updated.city) == (
            before.id,
            before.name,
            before.street,
            before.city,
        )

    def test_update_is_visible_to_later_reads(self, store):
        store.edit_phone("Venla Ruuska", "09-1234")

        assert store.find_by_name("Venla Ruuska").phone == "09-1234"
        assert store.list_contacts(PhoneFilter.NO_PHONE) == []
        assert names(store.list_contacts(PhoneFilter.HAS_PHONE))[-1] == "Venla Ruuska"
        assert store.count() == 3

    def test_position_is_kept(self, store):
        store.edit_phone("Arto Hellas", "000")

        assert names(store.list_contacts())[0] == "Arto Hellas"

    def test_unknown_name_returns_none_without_changes(self, store):
        before = store.list_contacts()

        assert store.edit_phone("Nobody", "123") is None
        assert store.list_contacts() == before


@pytest.mark.unit
class TestSeed:
    def test_from_seed_rejects_duplicate_names(self):
        record = ContactRecord(id="1", name="Dup", street="s", city="c")

        with pytest.raises(DuplicateNameError):
            ContactStore.from_seed([record, record])

    def test_from_seed_copies_records(self):
        store = ContactStore.from_seed(SEED_CONTACTS)
        store.edit_phone("Venla Ruuska", "09-1234")

        assert SEED_CONTACTS[2].phone is None

    def test_create_seeded_store(self):
        assert names(create_seeded_store(seed=True).list_contacts()) == [
            c.name for c in SEED_CONTACTS
        ]

    def test_create_unseeded_store(self):
        assert create_seeded_store(seed=False).count() == 0
