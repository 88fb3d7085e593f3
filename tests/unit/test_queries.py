from contactform.core import queries


def _compiled(statement):
    return statement.compile()


def test_insert_binds_fields_in_order(alice):
    compiled = _compiled(queries.insert_contact(alice))

    assert str(compiled).startswith("INSERT INTO \"contactForm\" (name, email, phone, location, dob)")
    assert [compiled.params[name] for name in queries.CONTACT_FIELDS] == [
        "Alice Smith",
        "a@b.com",
        "1234567890",
        "Springfield",
        "1990-01-01",
    ]


def test_insert_ignores_unknown_keys(alice):
    compiled = _compiled(queries.insert_contact(dict(alice, id=99, admin=True)))

    assert set(compiled.params) == set(queries.CONTACT_FIELDS)


def test_select_by_id_binds_value_unchanged():
    compiled = _compiled(queries.select_contact("not-a-number"))

    assert "WHERE \"contactForm\".id = :id_1" in str(compiled)
    assert compiled.params == {"id_1": "not-a-number"}


def test_update_sets_all_fields_and_filters_by_id():
    compiled = _compiled(queries.update_contact("7", {"location": "Metropolis"}))
    sql = str(compiled)

    assert sql.startswith("UPDATE \"contactForm\" SET name=:name, email=:email")
    assert "WHERE \"contactForm\".id = :id_1" in sql
    assert compiled.params["location"] == "Metropolis"
    assert compiled.params["name"] is None
    assert compiled.params["id_1"] == "7"


def test_delete_filters_by_id():
    compiled = _compiled(queries.delete_contact(3))

    assert str(compiled) == "DELETE FROM \"contactForm\" WHERE \"contactForm\".id = :id_1"
    assert compiled.params == {"id_1": 3}


def test_list_orders_by_primary_key():
    assert str(_compiled(queries.select_contacts())).endswith("ORDER BY \"contactForm\".id")
