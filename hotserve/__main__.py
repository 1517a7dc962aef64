from hotserve.main import main

main()
