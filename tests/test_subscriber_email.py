import pytest

from newsletter.domain import NewSubscriber, SubscriberEmail
from newsletter.errors import InvalidEmailError, InvalidNameError


@pytest.mark.parametrize(
    "email",
    [
        "ursula_le_guin@gmail.com",
        "user@example.com",
        "first.last@example.org",
        "user+tag@sub.example.co.uk",
        "a@b.io",
        "x_y-z.0@domain-with-dash.net",
    ],
)
def test_valid_emails_are_parsed_successfully(email):
    parsed = SubscriberEmail.parse(email)
    assert parsed.value == email
    assert str(parsed) == email


def test_original_input_is_kept_unnormalized():
    email = "Ursula@Example.COM"
    assert SubscriberEmail.parse(email).value == email


@pytest.mark.parametrize(
    "email",
    [
        "",
        "not-an-email",
        "@missing-local.com",
        "missing-domain@",
        "ursuladomain.com",
        "user@localhost",
        "two@@example.com",
        "spaces in@example.com",
    ],
)
def test_malformed_emails_are_rejected(email):
    with pytest.raises(InvalidEmailError) as exc_info:
        SubscriberEmail.parse(email)
    assert exc_info.value.raw == email


def test_new_subscriber_parses_both_fields():
    subscriber = NewSubscriber.parse(name="le guin", email="ursula_le_guin@gmail.com")
    assert subscriber.name.value == "le guin"
    assert subscriber.email.value == "ursula_le_guin@gmail.com"


def test_new_subscriber_rejects_invalid_email():
    with pytest.raises(InvalidEmailError):
        NewSubscriber.parse(name="le guin", email="not-an-email")


def test_new_subscriber_rejects_invalid_name():
    with pytest.raises(InvalidNameError):
        NewSubscriber.parse(name="{le guin}", email="ursula_le_guin@gmail.com")


def test_generated_safe_emails_are_parsed_successfully(faker):
    for _ in range(200):
        email = faker.safe_email()
        assert SubscriberEmail.parse(email).value == email


@pytest.mark.parametrize("value", ["not-an-email", "@missing-local.com", "missing-domain@"])
def test_constructor_validates_like_parse(value):
    with pytest.raises(InvalidEmailError):
        SubscriberEmail(value)
