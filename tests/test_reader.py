"""
Reader / Writer Tests - Load and save .slha files, keeping their layout.
"""

import logging
import tempfile
from pathlib import Path

import pytest

from slhaea.document import SLHADocument
from slhaea.line import SLHALine
from slhaea.reader import SLHAReader
from slhaea.writer import SLHAWriter


SPECTRUM = (
    "# SUSY Les Houches Accord 2 - MSSM spectrum\n"
    "BLOCK SPINFO   # Spectrum calculator information\n"
    "     1   SOFTSUSY    # spectrum calculator\n"
    "     2   4.0.0       # version number\n"
    "BLOCK MASS   # Mass spectrum\n"
    "#  PDG code      mass          particle\n"
    "        25     1.10899057E+02   # h0\n"
    "   1000022     9.69607530E+01   # ~chi_10\n"
    "#         PDG            Width\n"
    "DECAY   1000022     1.00000000E-03   # neutralino1 decays\n"
    "#          BR         NDA      ID1       ID2\n"
    "     5.00000000E-01    2          22        11   # BR(~chi_10 -> gamma e)\n"
    "     5.00000000E-01    2          22        13   # BR(~chi_10 -> gamma mu)\n"
)


@pytest.fixture
def slha_file():
    with tempfile.NamedTemporaryFile(suffix=".slha", delete=False) as f:
        f.write(SPECTRUM.encode("utf-8"))
        path = f.name
    yield path
    Path(path).unlink()


class TestReader:

    def test_read_file(self, slha_file):
        doc = SLHAReader.read(slha_file)
        assert doc.block_names == ["", "SPINFO", "MASS", "1000022"]

    def test_read_round_trip(self, slha_file):
        doc = SLHAReader.read(slha_file)
        assert doc.format() == SPECTRUM

    def test_comment_before_decay_goes_to_previous_block(self, slha_file):
        doc = SLHAReader.read(slha_file)
        assert doc.at("MASS")[-1].is_comment_line
        assert len(doc.at("MASS")) == 5

    def test_read_accepts_path_object(self, slha_file):
        doc = SLHAReader.read(Path(slha_file))
        assert doc.field("MASS;25;1") == "1.10899057E+02"

    def test_parse_bytes(self):
        doc = SLHAReader.parse(SPECTRUM.encode("utf-8"))
        assert doc.field("1000022;DECAY;2") == "1.00000000E-03"

    def test_parse_str(self):
        doc = SLHAReader.parse(SPECTRUM)
        assert doc.field("1000022;(any),2,22,13;0") == "5.00000000E-01"

    def test_read_stream(self, slha_file):
        with open(slha_file, encoding="utf-8") as f:
            doc = SLHAReader.read_stream(f)
        assert doc == SLHAReader.read(slha_file)

    def test_file_size_limit_enforced(self, slha_file):
        with pytest.raises(ValueError, match="exceeds maximum"):
            SLHAReader.read(slha_file, max_size=50)

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            SLHAReader.read("/nonexistent/spectrum.slha")

    def test_logs_block_count(self, slha_file, caplog):
        with caplog.at_level(logging.DEBUG, logger="slhaea.reader"):
            SLHAReader.read(slha_file)
        assert "Parsed 4 blocks" in caplog.text


class TestWriter:

    def test_serialize(self):
        doc = SLHADocument.parse(SPECTRUM)
        assert SLHAWriter.serialize(doc) == SPECTRUM.encode("utf-8")

    def test_write_and_read_back(self):
        doc = SLHADocument.parse(SPECTRUM)
        with tempfile.NamedTemporaryFile(suffix=".slha", delete=False) as f:
            path = f.name

        written = SLHAWriter.write(doc, path)
        assert written == len(SPECTRUM.encode("utf-8"))
        assert Path(path).read_text(encoding="utf-8") == SPECTRUM
        assert SLHAReader.read(path) == doc

        Path(path).unlink()

    def test_document_write(self):
        doc = SLHADocument()
        mass = doc.find_or_add("MASS")
        mass.append(SLHALine().add_fields("BLOCK", "MASS", "# Mass spectrum"))
        mass.append(SLHALine().add_fields(25, "1.25E+02", "# h0"))

        with tempfile.NamedTemporaryFile(suffix=".slha", delete=False) as f:
            path = f.name

        doc.write(path)
        raw = Path(path).read_text(encoding="utf-8")
        assert raw == "BLOCK MASS  # Mass spectrum\n 25     1.25E+02    # h0\n"

        # Reading the canonical output back keeps the same layout
        assert SLHAReader.read(path).format() == raw

        Path(path).unlink()

    def test_edit_keeps_other_lines(self):
        doc = SLHADocument.parse(SPECTRUM)
        doc.set_field("MASS;25;1", "1.25000000E+02")
        out = doc.format()

        assert "        25     1.25000000E+02   # h0\n" in out
        assert out.replace("1.25000000E+02", "1.10899057E+02") == SPECTRUM
