"""Sample outline served when no generation webhook is configured."""

SAMPLE_OUTLINE = {
    "title": "Building Flappy Bird with Unity",
    "subtitle": "A Complete Beginner's Guide",
    "outline": [
        {
            "slideNumber": 1,
            "title": "Introducing Flappy Bird",
            "content": [
                "What is Flappy Bird?",
                "Why learn game development with Flappy Bird?",
                "Game mechanics covered in this lesson",
            ],
            "notes": "Explain the core game concept and why it makes a good first project",
        },
        {
            "slideNumber": 2,
            "title": "Setting Up the Unity Project",
            "content": [
                "Install Unity Hub",
                "Create a new 2D project",
                "Project folder structure",
            ],
            "notes": "Demo the installation and project setup",
        },
        {
            "slideNumber": 3,
            "title": "Creating the Player (Bird)",
            "content": [
                "Import the bird sprite",
                "Add a Rigidbody2D",
                "Script the jump control",
            ],
            "notes": "Hands-on session building the bird character",
            "codeSnippet": {
                "language": "csharp",
                "code": (
                    "using UnityEngine;\n"
                    "\n"
                    "public class BirdController : MonoBehaviour\n"
                    "{\n"
                    "    public float jumpForce = 5f;\n"
                    "    private Rigidbody2D rb;\n"
                    "\n"
                    "    void Start()\n"
                    "    {\n"
                    "        rb = GetComponent<Rigidbody2D>();\n"
                    "    }\n"
                    "\n"
                    "    void Update()\n"
                    "    {\n"
                    "        if (Input.GetMouseButtonDown(0))\n"
                    "        {\n"
                    "            rb.velocity = Vector2.up * jumpForce;\n"
                    "        }\n"
                    "    }\n"
                    "}"
                ),
            },
        },
    ],
    "metadata": {
        "totalSlides": 12,
        "estimatedDuration": "90 minutes",
        "prerequisites": ["Basic C# knowledge", "Unity installed"],
        "learningOutcomes": [
            "Build a simple 2D game",
            "Understand physics in Unity",
            "Understand the game loop and input handling",
        ],
    },
}
