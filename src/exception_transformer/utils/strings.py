def convert_snake_case_to_title_case(value: str) -> str:
    """
    "phone_number" -> "Phone Number". Empty segments ("a__b") stay empty.
    """
    return " ".join(word[:1].upper() + word[1:] for word in value.split("_"))
