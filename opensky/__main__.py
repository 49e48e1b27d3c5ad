from opensky.cli import main

main()
