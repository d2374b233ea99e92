from indentprint.ppconfig import PPConfig, PPIndentInfo


def test_defaults():
    cfg = PPConfig()
    assert cfg.right_margin == 80
    assert cfg.indent_width == 2
    assert cfg.assert_indent_threshold == 10000


def test_ugly():
    cfg = PPConfig.ugly()
    assert cfg.right_margin == 99999999
    assert cfg.indent_width == 0
    assert cfg.assert_indent_threshold == 10


def test_ugly_is_fresh_instance():
    a = PPConfig.ugly()
    a.right_margin = 5
    assert PPConfig.ugly().right_margin == 99999999


def test_indent_info_ci1_is_one_level_deeper():
    state = object()
    for ci0 in (0, 3, 17):
        for width in (0, 2, 4):
            info = PPIndentInfo(state, ci0, width, True)
            assert info.ci1 - info.ci0 == width
            assert info.pps is state
            assert info.upto is True


def test_indent_info_upto_false():
    info = PPIndentInfo(None, 5, 2, False)
    assert info.upto is False
    assert info.ci1 == 7