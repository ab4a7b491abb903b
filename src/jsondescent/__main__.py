from jsondescent.cli import main

main()
