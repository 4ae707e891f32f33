from lyricconv.song.model import Comment, Empty, Lyric, Song


def test_add_lyric_numbers_only_timed_entries():
    song = Song()
    song.add_comment("c")
    first = song.add_lyric(0, 1000, text="a")
    song.add_empty()
    second = song.add_lyric(1000, 2000, text="b")
    assert (first.num, second.num) == (1, 2)
    assert song.current_num == 2
    assert list(song.timed()) == [first, second]


def test_retract_last():
    song = Song()
    song.add_lyric(0, 1000)
    song.add_comment("c")
    assert song.retract_last() == Comment("c")
    assert song.current_num == 1
    assert isinstance(song.retract_last(), Lyric)
    assert song.current_num == 0
    assert song.last is None


def test_append_text():
    lyric = Lyric(num=1, start_ms=0, stop_ms=0)
    lyric.append_text("a")
    lyric.append_text("b")
    assert lyric.text == "a\nb"


def test_last():
    song = Song()
    song.add_empty()
    assert song.last == Empty()
