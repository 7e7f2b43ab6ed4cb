from schedcal_cli import main

main()
