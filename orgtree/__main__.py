from orgtree.interfaces.cli.main import main

main()
