"""CSS styles for the setup checklist TUI."""

CHECKLIST_CSS = """
SetupChecklist {
    height: auto;
    border: solid #2a2a2a;
    border-title-align: left;
    border-title-color: #a0a0a0;
    background: #0a0a0a;
    padding: 0 1;
    margin: 1 1;
}

#checklist-header {
    height: auto;
}

#checklist-title {
    width: 1fr;
    text-style: bold;
    color: #ffffff;
}

#checklist-dismiss, #celebration-dismiss {
    min-width: 8;
    height: 1;
    border: none;
    background: #333333;
    color: #a0a0a0;
}

#checklist-dismiss:hover, #celebration-dismiss:hover {
    background: #ff4f18;
    color: #ffffff;
}

#checklist-progress {
    color: #a0a0a0;
    margin-bottom: 1;
}

#checklist-steps {
    height: auto;
    background: transparent;
    border: none;
}

#checklist-steps > StepListItem {
    padding: 0 0;
}

#checklist-steps > StepListItem.--highlight .step-label {
    background: #ff4f18;
    color: #ffffff;
}

.step-label {
    color: #e5e5e5;
}

#checklist-celebration {
    height: auto;
    padding: 1 0;
}

#celebration-message {
    color: #00cc00;
    text-style: bold;
    margin-bottom: 1;
}
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: #000000;
    color: #e5e5e5;
}

#app-title {
    text-style: bold;
    color: #ffffff;
    padding: 0 1;
}

#route-line {
    color: #666666;
    padding: 0 1;
}
"""
