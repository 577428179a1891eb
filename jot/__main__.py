from jot.interfaces.cli.main import main

main()
