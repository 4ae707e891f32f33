from lyricconv.cli import main

main()
