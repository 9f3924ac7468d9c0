import pytest
from click.testing import CliRunner

from fastaval.__main__ import cli


@pytest.mark.parametrize(
    "content,expected",
    [
        (">seq1\nACGT\n", 0),
        ("ACGT\n>seq1\nACGT\n", 1),
        (">seq1\nACGT\n>seq1\nACGT\n", 2),
        (">seq1\nACG1\n", 4),
        (">seq1\n>seq2\nACGT\n", 8),
    ],
)
@pytest.mark.parametrize("name", ["in.fasta", "in.fasta.gz"])
def test_validate_exit_codes(runner, write_fasta, content, expected, name):
    path = write_fasta(name, content)
    r = runner.invoke(cli, ["validate", str(path)])
    assert r.exit_code == expected
    assert r.output == ""


def test_validate_missing_file(runner, tmp_path):
    r = runner.invoke(cli, ["validate", str(tmp_path / "none.fa")])
    assert r.exit_code == 1


def test_validate_verbose_failure(runner, write_fasta):
    path = write_fasta("x.fa", ">seq1\nACGT\n>seq1 again\nACGT\n")
    r = runner.invoke(cli, ["validate", "-v", str(path)])
    assert r.exit_code == 2
    assert "[ERROR]" in r.output
    assert "|>seq1|" in r.output


def test_validate_verbose_success(runner, write_fasta):
    path = write_fasta("x.fa", ">seq1\nACGT\n")
    r = runner.invoke(cli, ["validate", "--verbose", str(path)])
    assert r.exit_code == 0
    assert "valid FASTA file" in r.output


def test_validate_line_length_options(runner, write_fasta):
    path = write_fasta("x.fa", ">s\nACGTACGT\n")
    r = runner.invoke(cli, ["validate", "--max-line-length", "4", str(path)])
    assert r.exit_code == 16
    r = runner.invoke(
        cli, ["validate", "--max-line-length", "4", "--overlong", "truncate", str(path)]
    )
    assert r.exit_code == 0


def test_validate_rejects_bad_options(runner, write_fasta):
    path = write_fasta("x.fa", ">s\nA\n")
    r = runner.invoke(cli, ["validate", "--max-line-length", "0", str(path)])
    assert r.exit_code == 2
    r = runner.invoke(cli, ["validate", "--overlong", "wrap", str(path)])
    assert r.exit_code == 2


def test_validate_reads_config_file(runner, write_fasta, isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text("validate:\n  max_line_length: 4\n")
    path = write_fasta("x.fa", ">s\nACGTACGT\n")
    assert runner.invoke(cli, ["validate", str(path)]).exit_code == 16
    # command line wins over the config file
    r = runner.invoke(cli, ["validate", "--max-line-length", "100", str(path)])
    assert r.exit_code == 0


def test_validate_explicit_config_path(runner, write_fasta, tmp_path):
    cfg = tmp_path / "other.json"
    cfg.write_text('{"validate": {"max_line_length": 4, "overlong_lines": "truncate"}}')
    path = write_fasta("x.fa", ">s\nACGTACGT\n")
    r = runner.invoke(cli, ["validate", "--config", str(cfg), "--overlong", "error", str(path)])
    assert r.exit_code == 16


def test_validate_malformed_config(runner, write_fasta, isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text("validate:\n  overlong_lines: wrap\n")
    path = write_fasta("x.fa", ">s\nA\n")
    r = runner.invoke(cli, ["validate", str(path)])
    assert r.exit_code == 255
    assert "overlong_lines" in r.output


def test_validate_unparsable_config_is_not_a_content_code(runner, write_fasta, isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text("validate: [\n")
    path = write_fasta("x.fa", ">s\nACGT\n")
    r = runner.invoke(cli, ["validate", str(path)])
    assert r.exit_code == 255
    assert "malformed" in r.output


def test_validate_gzip_and_plain_agree(write_fasta):
    content = ">a x\nAC\n>b\nGT\n>a y\nAA\n"
    codes = {
        CliRunner().invoke(cli, ["validate", str(write_fasta(name, content))]).exit_code
        for name in ("same.fa", "same.fa.gz")
    }
    assert codes == {2}
