import pytest
from bson import ObjectId
from pydantic import ValidationError

from hotel.models import MenuItem, MenuItemCreate, MenuItemUpdate, Person, PersonCreate
from hotel.models.casting import scalar_to_str


def test_person_document_skips_unset_optionals():
    person = PersonCreate(name="Eve", work="waiter", mobile=9000000001, email="eve@example.com")

    assert person.to_document() == {"name": "Eve", "work": "waiter", "mobile": 9000000001, "email": "eve@example.com"}


def test_person_from_document_stringifies_object_id():
    object_id = ObjectId()
    document = {"_id": object_id, "name": "Eve", "work": "chef", "mobile": 9000000001, "email": "eve@example.com"}

    person = Person.from_document(document)

    assert person.id == str(object_id)
    assert person.model_dump(by_alias=True, exclude_none=True)["_id"] == str(object_id)


def test_menu_item_rejects_unknown_taste():
    with pytest.raises(ValidationError):
        MenuItemCreate(name="Soup", price=5, taste="salty")


def test_menu_item_defaults():
    document = MenuItemCreate(name="Soup", price=5, taste="sour").to_document()

    assert document == {
        "name": "Soup",
        "price": 5.0,
        "taste": "sour",
        "is_drink": False,
        "ingredients": [],
        "num_sales": 0,
    }


def test_menu_update_keeps_only_supplied_fields():
    update = MenuItemUpdate.model_validate({"num_sales": 3, "taste": "sweet", "name": None, "extra": True})

    assert update.to_update() == {"num_sales": 3, "taste": "sweet"}


def test_menu_item_ignores_storage_only_fields():
    item = MenuItem.from_document({"_id": ObjectId(), "__v": 0, "name": "Tea", "price": 2, "taste": "sweet"})

    assert "__v" not in item.model_dump(by_alias=True)


@pytest.mark.parametrize(
    "value, expected",
    [(123, "123"), (4.0, "4"), (2.5, "2.5"), (True, "true"), ("Ravi", "Ravi"), (None, None)],
)
def test_scalar_to_str(value, expected):
    assert scalar_to_str(value) == expected


def test_person_read_model_accepts_older_records():
    person = Person.from_document({"_id": ObjectId(), "name": "Old", "age": 30.5, "email": "o@x.io"})

    assert person.age == 30.5
    assert person.work is None
    assert person.mobile is None


def test_person_create_still_requires_work_and_integer_age():
    with pytest.raises(ValidationError):
        PersonCreate(name="New", age=30.5, mobile=9876543210, email="n@x.io")
