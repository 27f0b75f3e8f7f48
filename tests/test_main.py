from click.testing import CliRunner

from rpncalc.main import main


def test_shell_prints_values():
    runner = CliRunner()
    result = runner.invoke(main, input="2 * 2 + 48 / 4\n(2 + 3) * 4\n7 / 2\n")

    assert result.exit_code == 0
    assert result.stdout == "16\n20\n3.5\n"


def test_shell_keeps_going_after_errors():
    runner = CliRunner()
    result = runner.invoke(main, input="2 $ 3\n4 / 0\n2 +\n(1\n1 + 1\n")

    assert result.exit_code == 0
    assert result.stdout == "2\n"
    assert "2 $ 3\n  ^ unexpected character '$'\n" in result.stderr
    assert "2 +\n  ^ not enough operands for '+'\n" in result.stderr
    assert "(1\n^ mismatched parentheses\n" in result.stderr


def test_shell_skips_blank_lines():
    runner = CliRunner()
    result = runner.invoke(main, input="\n   \n1 + 2\n\n")

    assert result.exit_code == 0
    assert result.stdout == "3\n"


def test_shell_accepts_crlf_lines():
    runner = CliRunner()
    result = runner.invoke(main, input="1 + 2\r\n\r\n2 * 3\r\n")

    assert result.exit_code == 0
    assert result.stdout == "3\n6\n"
    assert result.stderr == ""


def test_show_postfix():
    runner = CliRunner()
    result = runner.invoke(main, ["--show-postfix"], input="2 + 3 * 4\n")

    assert result.exit_code == 0
    assert result.stdout == "2 3 4 * +\n14\n"


def test_file_input_and_output(tmp_path):
    source = tmp_path / "expressions.txt"
    source.write_text("2 ! 3\r\n50 % 8\n")
    target = tmp_path / "values.txt"

    runner = CliRunner()
    result = runner.invoke(main, [str(source), "-o", str(target)])

    assert result.exit_code == 0
    assert target.read_text() == "9\n4\n"


def test_config_file(tmp_path):
    config = tmp_path / "rpncalc_conf.py"
    config.write_text("show_postfix = True\nprompt = '> '\n")

    runner = CliRunner()
    result = runner.invoke(main, ["-c", str(config)], input="1 + 2\n")

    assert result.exit_code == 0
    assert result.stdout == "1 2 +\n3\n"


def test_flag_overrides_config_file(tmp_path):
    config = tmp_path / "rpncalc_conf.py"
    config.write_text("show_postfix = True\n")

    runner = CliRunner()
    result = runner.invoke(
        main, ["-c", str(config), "--no-show-postfix"], input="1 + 2\n"
    )

    assert result.exit_code == 0
    assert result.stdout == "3\n"


def test_bad_config_file(tmp_path):
    config = tmp_path / "rpncalc_conf.py"
    config.write_text("colour = 'red'\n")

    runner = CliRunner()
    result = runner.invoke(main, ["-c", str(config)], input="1 + 2\n")

    assert result.exit_code == 2
    assert "unknown configuration option: colour" in result.stderr


def test_verbose_logs_lines():
    runner = CliRunner()
    result = runner.invoke(main, ["-vv"], input="1 + 2\n")

    assert result.exit_code == 0
    assert result.stdout == "3\n"
    assert "processing '1 + 2'" in result.stderr
