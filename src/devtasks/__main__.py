from devtasks.cli.main import main

main()
