"""Well-known weak passwords rejected outright, whatever their casing."""

COMMON_PASSWORDS = frozenset({
    "123456", "123456789", "12345", "12345678", "1234", "111111", "123123", "1234567",
    "qwerty", "abc123", "password", "password1", "admin", "letmein", "welcome", "monkey",
    "login", "princess", "qwerty123", "football", "iloveyou", "sunshine", "starwars",
    "dragon", "passw0rd", "master", "hello", "freedom", "whatever", "trustno1", "shadow",
    "killer", "superman", "batman", "zaq1zaq1", "123qwe", "1q2w3e4r", "qazwsx",
    "password123", "admin123",
})


def is_common(password: str) -> bool:
    if not password:
        return False
    return password.lower() in COMMON_PASSWORDS
