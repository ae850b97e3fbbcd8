#!/usr/bin/env python3
"""
Quick Start Guide for the Strict XML Reader.

Reads a small cinema listing, pulls typed values out of it and uses done()
to prove that nothing in the document was left unread.
"""

import sys

from strict_xml_reader import Document, XMLReaderError

LISTING = """<?xml version="1.0" encoding="UTF-8"?>
<Cinema name="Regal" screens="3">
  <!-- updated nightly -->
  <Film id="1" subtitled="yes">
    <Title>Heat</Title>
    <Year>1995</Year>
    <Length>170.5</Length>
    <Showing>18:00</Showing>
    <Showing>21:30</Showing>
  </Film>
  <Film id="2">
    <Title>Ran</Title>
    <Year>1985</Year>
    <Archive>True</Archive>
  </Film>
  <Notes>Cash only</Notes>
</Cinema>
"""


def read_listing(text: str) -> None:
    """Walk the listing, printing each film."""
    document = Document("Cinema")
    document.read_string(text)

    print(f"Cinema: {document.string_attribute('name')}, "
          f"{document.number_attribute('screens')} screens")

    for film in document.node_children("Film"):
        title = film.string_child("Title")
        year = film.number_child("Year")
        length = film.optional_number_child("Length", float)
        showings = [showing.content() for showing in film.node_children("Showing")]
        archived = film.optional_bool_child("Archive") or False
        subtitled = film.optional_bool_attribute("subtitled") or False
        film.done()

        print(f"  #{film.number_attribute('id')} {title} ({year})"
              f" length={length} showings={showings}"
              f" archived={archived} subtitled={subtitled}")

    document.ignore_child("Notes")
    document.done()
    print("Listing fully consumed")


def main():
    """Main function."""
    try:
        read_listing(LISTING)
        # An unknown element is caught by done()
        read_listing(LISTING.replace("<Notes>", "<Parking>no</Parking><Notes>"))
        return 0

    except XMLReaderError as e:
        print(f"\nListing rejected: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
