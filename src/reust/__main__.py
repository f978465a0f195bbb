from reust.cli import main

main()
