"""Helpers shared by the tool tests."""


def result_text(result):
    """The single text block of a tool result."""
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


def airport_json(code, lat, lon, **extra):
    """An airport endpoint response holding one record."""
    record = {"icaoId": code, "name": f"{code} Airport", "lat": lat, "lon": lon}
    record.update(extra)
    return [record]
