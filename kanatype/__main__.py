from kanatype.cli import main

main()
