import main


class TestMain():
    def test_allocation_failure_is_fatal(self, monkeypatch, capsys):
        """ Running out of memory ends the shell with a diagnostic. """
        def boom():
            raise MemoryError()
        monkeypatch.setattr(main, "main_loop", boom)
        assert main.main() == 1
        assert capsys.readouterr().err == "lsh: allocation error\n"

    def test_normal_exit(self, monkeypatch):
        """ A loop that stops normally gives exit status 0. """
        monkeypatch.setattr(main, "main_loop", lambda: 0)
        assert main.main() == 0
