from promapi.cli import main

main()
