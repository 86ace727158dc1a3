from lexicon.cli import main

main()
