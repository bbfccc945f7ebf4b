from templategen.main import main

main(prog_name="template-gen")
