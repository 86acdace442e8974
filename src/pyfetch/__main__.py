from pyfetch.app import main

main()
