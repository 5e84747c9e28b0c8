from verboten.main import main

main()
