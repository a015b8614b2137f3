from occam_razor.cli import main

main()
