from rainsrc.cli import main

main()
