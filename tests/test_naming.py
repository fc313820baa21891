from __future__ import annotations

import pytest

from resourcegen.core.errors import InvalidNameError
from resourcegen.naming import camelize, classify, dasherize, singularize, transform


@pytest.mark.parametrize(
    "value, expected",
    [
        ("users", "Users"),
        ("_users", "_Users"),
        ("__users", "__Users"),
        ("user-profiles", "UserProfiles"),
        ("user.profiles", "UserProfiles"),
        ("user profiles", "UserProfiles"),
        ("user_profiles", "User_profiles"),
        ("userProfiles", "UserProfiles"),
        ("orders2", "Orders2"),
        ("café-orders", "CafOrders"),
    ],
)
def test_classify(value, expected):
    assert classify(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("users", "users"),
        ("_users", "_users"),
        ("UserProfiles", "user-profiles"),
        ("userProfiles", "user-profiles"),
        ("user profiles", "user-profiles"),
        ("user_profiles", "user_profiles"),
        ("café", "café"),
    ],
)
def test_dasherize(value, expected):
    assert dasherize(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("users", "users"),
        ("_users", "_users"),
        ("UserProfiles", "userProfiles"),
        ("user-profiles", "userProfiles"),
    ],
)
def test_camelize(value, expected):
    assert camelize(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("users", "user"),
        ("Users", "User"),
        ("_users", "_user"),
        ("_Users", "_User"),
        ("USERS", "USER"),
        ("categories", "category"),
        ("ties", "tie"),
        ("classes", "class"),
        ("boxes", "box"),
        ("matches", "match"),
        ("wishes", "wish"),
        ("buzzes", "buzz"),
        ("status", "status"),
        ("address", "address"),
        ("analysis", "analysis"),
        ("people", "person"),
        ("People", "Person"),
        ("children", "child"),
        ("statuses", "status"),
        ("movies", "movie"),
        ("series", "series"),
        ("news", "news"),
        ("data", "data"),
        ("user", "user"),
        ("UserProfiles", "UserProfile"),
        ("user-profiles", "user-profile"),
        ("user_profiles", "user_profile"),
        ("SalesPeople", "SalesPerson"),
        ("peoples", "person"),
        ("Womens", "Woman"),
        ("SalesMens", "SalesMan"),
        ("users-", "user-"),
        ("orders2", "order2"),
        ("user-profiles_", "user-profile_"),
        ("s", "s"),
        ("", ""),
    ],
)
def test_singularize(value, expected):
    assert singularize(value) == expected


@pytest.mark.parametrize(
    "value",
    ["users", "categories", "classes", "aliases", "alias", "People", "news", "user_profiles", "boxes", "analyses",
     "peoples", "feets", "childrens", "SalesMens", "Womens", "users-", "orders2"],
)
def test_singularize_is_idempotent(value):
    once = singularize(value)
    assert singularize(once) == once


def test_transform_plain_name():
    name = transform("users")
    assert name.raw == "users"
    assert name.classified == "Users"
    assert name.singular_classified == "User"
    assert name.file_stem == "users"
    assert name.singular_file_stem == "user"


def test_transform_keeps_leading_underscore():
    name = transform("_users")
    assert name.classified == "_Users"
    assert name.singular_classified == "_User"
    assert name.file_stem == "_users"
    assert name.singular_file_stem == "_user"


@pytest.mark.parametrize("raw", ["users", "_users", "__orders", "user-profiles", "UserProfiles", "_a_b"])
def test_transform_is_idempotent(raw):
    once = transform(raw)
    assert transform(once.classified).classified == once.classified
    assert transform(once.file_stem).file_stem == once.file_stem


@pytest.mark.parametrize("raw", ["_users", "__users", "_x", "users"])
def test_classified_starts_with_raw_underscore_run(raw):
    run = raw[: len(raw) - len(raw.lstrip("_"))]
    name = transform(raw)
    for form in (name.classified, name.singular_classified, name.file_stem, name.singular_file_stem):
        assert form.startswith(run)
        assert not form[len(run):].startswith("_")


def test_transform_trims_whitespace():
    assert transform("  users  ").file_stem == "users"


@pytest.mark.parametrize("raw", ["", "   ", "---", "_"])
def test_transform_rejects_unusable_names(raw):
    with pytest.raises(InvalidNameError):
        transform(raw)


@pytest.mark.parametrize(
    "raw, singular_classified, singular_file_stem",
    [
        ("users-", "User", "user-"),
        ("orders2", "Order2", "order2"),
        ("Peoples", "Person", "person"),
    ],
)
def test_transform_singular_forms_agree(raw, singular_classified, singular_file_stem):
    name = transform(raw)
    assert name.singular_classified == singular_classified
    assert name.singular_file_stem == singular_file_stem
