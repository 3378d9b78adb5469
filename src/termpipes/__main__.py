from termpipes.cli import main

main()
