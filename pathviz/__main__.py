from pathviz.app.viewer import main

main()
