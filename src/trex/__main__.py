from trex.main import main

main()
