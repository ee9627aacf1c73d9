from utils.cms import map_artist_node


def test_artist_node():
    # Arrange
    node = {
        "id": "dGVhbTox",
        "title": "Bella",
        "teammemberfields": {
            "role": "Lead Artist",
            "bio": "Ten years of bridal work",
            "specialtiesSeparatedByCommas": "Bridal, Airbrush ,, Lashes",
            "experience": "10 years",
            "calendarId": "bella@group.calendar.google.com",
            "profilePicture": {"node": {"sourceUrl": "https://cdn.example.com/bella.jpg"}},
        },
    }

    # Act
    artist = map_artist_node(node)

    # Assert
    assert artist.name == "Bella"
    assert artist.specialties == ["Bridal", "Airbrush", "Lashes"]
    assert artist.image == "https://cdn.example.com/bella.jpg"
    assert artist.calendar_id == "bella@group.calendar.google.com"


def test_artist_node_without_picture_or_calendar():
    # Arrange
    node = {
        "id": "dGVhbToy",
        "title": "Mia",
        "teammemberfields": {
            "role": "Stylist",
            "specialtiesSeparatedByCommas": "",
            "calendarId": "",
            "profilePicture": None,
        },
    }

    # Act
    artist = map_artist_node(node)

    # Assert
    assert artist.specialties == []
    assert artist.image is None
    assert artist.calendar_id is None
