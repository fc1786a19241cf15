from resub.cli import main

main()
