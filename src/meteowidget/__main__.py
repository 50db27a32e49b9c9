from meteowidget.cli import main

main()
