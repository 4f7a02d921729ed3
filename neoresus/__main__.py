from neoresus.cli import main

main()
